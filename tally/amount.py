from dataclasses import dataclass
from typing import Callable

from .base import Commodity, CommodityMismatch, Numeric


@dataclass(frozen=True)
class Amount:
    """Numeric value in a commodity.

    Empty commodity marks an untyped number, it can be combined only
    with other untyped numbers.
    """

    value: Numeric
    commodity: Commodity = ""

    def combine(
        self, other: "Amount", op: Callable[[Numeric, Numeric], Numeric]
    ) -> "Amount":
        """Apply *op* to values of two amounts of the same commodity."""
        CommodityMismatch.must_match(self.commodity, other.commodity)
        return Amount(op(self.value, other.value), self.commodity)

    def __neg__(self) -> "Amount":
        return Amount(-self.value, self.commodity)

    def __str__(self):
        if self.commodity:
            return f"{self.value} {self.commodity}"
        return str(self.value)
