"""
Position: the (average_price, quantity) pair of a holding.

Immutable. A fill replaces the whole record, so quantity and cost basis can
never describe different fills.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

Number = Decimal | int | float | str

ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """Coerce a numeric input to Decimal. Floats go through str to keep 10.1 as 10.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Position:
    """Cost basis and signed size. Positive quantity = long, negative = short."""

    average_price: Decimal = ZERO
    quantity: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "average_price", to_decimal(self.average_price))
        quantity = self.quantity
        if quantity != int(quantity):
            raise ValueError(f"quantity must be a whole number, got {quantity!r}")
        object.__setattr__(self, "quantity", int(quantity))

    @classmethod
    def flat(cls) -> Position:
        """No holdings."""
        return cls(ZERO, 0)

    @property
    def absolute_quantity(self) -> int:
        return abs(self.quantity)

    @property
    def is_long(self) -> bool:
        return self.quantity > 0

    @property
    def is_short(self) -> bool:
        return self.quantity < 0

    @property
    def is_flat(self) -> bool:
        return self.quantity == 0
