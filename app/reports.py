import math
from collections import Counter
from decimal import Decimal

from app.models import (
    CategoryCount,
    CombinedReport,
    PriceRangeCount,
    Statistics,
    Transaction,
    TransactionPage,
)
from app.price_ranges import PRICE_RANGES
from app.store import DataStore

_ZERO = Decimal("0")


def parse_month(month: str) -> int:
    """Validate a month query value ("01".."12", "3" is accepted as "03")."""
    value = (month or "").strip()
    if not (value.isascii() and value.isdigit()) or len(value) > 2:
        raise ValueError(f"month must be a two-digit value 01-12, got {month!r}")
    number = int(value)
    if not 1 <= number <= 12:
        raise ValueError(f"month must be between 01 and 12, got {month!r}")
    return number


def price_text(price: Decimal) -> str:
    # 150 -> "150", 329.850 -> "329.85"
    return format(price.normalize(), "f")


def _matches_search(txn: Transaction, needle: str) -> bool:
    return (
        needle in txn.title.casefold()
        or needle in txn.description.casefold()
        or needle in price_text(txn.price)
    )


# ── building blocks over an already month-filtered list ─────────────────────

def _paginate(records: list[Transaction], page: int, per_page: int, search: str) -> TransactionPage:
    if page < 1:
        raise ValueError("page must be a positive integer")
    if per_page < 1:
        raise ValueError("perPage must be a positive integer")

    needle = search.casefold()
    matching = [t for t in records if _matches_search(t, needle)] if needle else records
    offset = (page - 1) * per_page

    return TransactionPage(
        transactions=matching[offset:offset + per_page],
        total=len(matching),
        current_page=page,
        total_pages=math.ceil(len(matching) / per_page),
    )


def _statistics(records: list[Transaction]) -> Statistics:
    sold = sum(1 for t in records if t.sold)
    return Statistics(
        total_sale_amount=sum((t.price for t in records), _ZERO),
        total_sold_items=sold,
        total_not_sold_items=len(records) - sold,
    )


def _bar_chart(records: list[Transaction]) -> list[PriceRangeCount]:
    return [
        PriceRangeCount(
            range=bucket.label,
            count=sum(1 for t in records if bucket.contains(t.price)),
        )
        for bucket in PRICE_RANGES
    ]


def _pie_chart(records: list[Transaction]) -> list[CategoryCount]:
    counts = Counter(t.category for t in records)
    return [CategoryCount(category=c, count=n) for c, n in counts.items()]


# ── public operations ───────────────────────────────────────────────────────

def list_transactions(
    store: DataStore,
    month: str,
    page: int = 1,
    per_page: int = 10,
    search: str = "",
) -> TransactionPage:
    records = store.get_transactions_for_month(parse_month(month))
    return _paginate(records, page, per_page, search)


def get_statistics(store: DataStore, month: str) -> Statistics:
    return _statistics(store.get_transactions_for_month(parse_month(month)))


def get_bar_chart(store: DataStore, month: str) -> list[PriceRangeCount]:
    return _bar_chart(store.get_transactions_for_month(parse_month(month)))


def get_pie_chart(store: DataStore, month: str) -> list[CategoryCount]:
    return _pie_chart(store.get_transactions_for_month(parse_month(month)))


def get_combined(
    store: DataStore,
    month: str,
    page: int = 1,
    per_page: int = 10,
    search: str = "",
) -> CombinedReport:
    # one snapshot for all four parts, so they agree with each other
    records = store.get_transactions_for_month(parse_month(month))
    return CombinedReport(
        transactions=_paginate(records, page, per_page, search),
        statistics=_statistics(records),
        bar_chart=_bar_chart(records),
        pie_chart=_pie_chart(records),
    )
