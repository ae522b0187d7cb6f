"""
Read-model types: an immutable snapshot of a holding.

Readers that need several fields to agree with each other (e.g. value and
unrealized profit) take a snapshot instead of reading live properties one by one.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any

from holdings_core.instrument import InstrumentKind


@dataclass(frozen=True)
class HoldingSnapshot:
    """State and derived metrics of one holding at one instant. Immutable."""

    symbol: str
    instrument_kind: InstrumentKind
    quantity: int
    average_price: Decimal
    price: Decimal
    holdings_cost: Decimal
    holdings_value: Decimal
    unrealized_profit: Decimal
    profit: Decimal
    total_fees: Decimal
    net_profit: Decimal
    last_trade_profit: Decimal
    total_sale_volume: Decimal

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
    def holds_position(self) -> bool:
        return self.quantity != 0

    def as_dict(self) -> dict[str, Any]:
        """Plain mapping (kind as its string value) for tabular export."""
        out = asdict(self)
        out["instrument_kind"] = self.instrument_kind.value
        return out
