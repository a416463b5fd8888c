from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator
from pydantic.alias_generators import to_camel


def parse_sale_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` or a full ISO timestamp into a calendar date."""
    if len(value) == 10:
        return date.fromisoformat(value)
    return datetime.fromisoformat(value).date()


class WireModel(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Transaction(WireModel):
    id: Optional[int] = None
    title: str
    description: str = ""
    price: Decimal = Field(ge=0)
    category: str
    sold: bool
    date_of_sale: str  # stored as text, e.g. "2021-11-27" or "2021-11-27T20:29:54+05:30"
    image: Optional[str] = None

    _sale_date: date = PrivateAttr()

    @field_validator("date_of_sale")
    @classmethod
    def _check_date(cls, value: str) -> str:
        parse_sale_date(value)
        return value

    def model_post_init(self, __context) -> None:
        self._sale_date = parse_sale_date(self.date_of_sale)

    @property
    def sale_date(self) -> date:
        return self._sale_date


# ── Response models ──────────────────────────────────────────────────────────

class TransactionPage(WireModel):
    transactions: list[Transaction]
    total: int
    current_page: int
    total_pages: int


class Statistics(WireModel):
    total_sale_amount: Decimal
    total_sold_items: int
    total_not_sold_items: int


class PriceRangeCount(WireModel):
    range: str
    count: int


class CategoryCount(WireModel):
    category: str
    count: int


class CombinedReport(WireModel):
    transactions: TransactionPage
    statistics: Statistics
    bar_chart: list[PriceRangeCount]
    pie_chart: list[CategoryCount]
