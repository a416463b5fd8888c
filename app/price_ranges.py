from decimal import Decimal
from typing import NamedTuple, Optional

# Prices at or above this are outside every bucket, including "901-above".
OPEN_RANGE_CUTOFF = Decimal("100000")


class PriceRange(NamedTuple):
    label: str
    low: Decimal             # inclusive
    high: Optional[Decimal]  # exclusive; None means open-ended (capped at OPEN_RANGE_CUTOFF)

    @property
    def upper(self) -> Decimal:
        return OPEN_RANGE_CUTOFF if self.high is None else self.high

    def contains(self, price: Decimal) -> bool:
        return self.low <= price < self.upper


# The lower bounds start one unit above the previous upper bound, so values
# such as 100.50 fall into no bucket.
PRICE_RANGES: tuple[PriceRange, ...] = (
    PriceRange("0-100",     Decimal("0"),   Decimal("100")),
    PriceRange("101-200",   Decimal("101"), Decimal("200")),
    PriceRange("201-300",   Decimal("201"), Decimal("300")),
    PriceRange("301-400",   Decimal("301"), Decimal("400")),
    PriceRange("401-500",   Decimal("401"), Decimal("500")),
    PriceRange("501-600",   Decimal("501"), Decimal("600")),
    PriceRange("601-700",   Decimal("601"), Decimal("700")),
    PriceRange("701-800",   Decimal("701"), Decimal("800")),
    PriceRange("801-900",   Decimal("801"), Decimal("900")),
    PriceRange("901-above", Decimal("901"), None),
)

