"""
PositionMetrics: cost/value math for a position, by instrument kind.

The default treats one unit of quantity as one unit of the instrument.
Contract instruments (options, futures) scale by a multiplier and override
only the formulas that differ. metrics_for() is the single dispatch point.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from holdings_core.instrument import InstrumentKind
from holdings_core.position import ZERO, Number, Position, to_decimal


class PositionMetrics:
    """Default metrics: cost = average_price * quantity, value = price * quantity."""

    def holdings_cost(self, position: Position) -> Decimal:
        """Signed acquisition cost. Negative when short; zero when flat."""
        return position.average_price * position.quantity

    def holdings_value(self, position: Position, price: Decimal) -> Decimal:
        """Signed mark-to-market value at price."""
        return price * position.quantity

    def close_gross(self, position: Position, price: Decimal) -> Decimal:
        """
        Gross profit of closing the whole position at price, before fees.

        Closing a long sells, so profit comes from price above cost; closing a
        short buys back, so profit comes from price below cost.
        """
        if position.is_long:
            return (price - position.average_price) * position.absolute_quantity
        if position.is_short:
            return (position.average_price - price) * position.absolute_quantity
        return ZERO

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@dataclass(frozen=True)
class ContractMetrics(PositionMetrics):
    """Derivative metrics: every quantity unit controls `multiplier` units of underlying."""

    multiplier: Decimal = Decimal("1")

    def __post_init__(self) -> None:
        multiplier = to_decimal(self.multiplier)
        if multiplier <= 0:
            raise ValueError(f"contract multiplier must be positive, got {multiplier}")
        object.__setattr__(self, "multiplier", multiplier)

    def holdings_cost(self, position: Position) -> Decimal:
        return super().holdings_cost(position) * self.multiplier

    def holdings_value(self, position: Position, price: Decimal) -> Decimal:
        return super().holdings_value(position, price) * self.multiplier

    def close_gross(self, position: Position, price: Decimal) -> Decimal:
        return super().close_gross(position, price) * self.multiplier


DEFAULT_METRICS = PositionMetrics()


def metrics_for(kind: InstrumentKind, contract_multiplier: Number = 1) -> PositionMetrics:
    """Metrics variant for an instrument kind. Options and futures use ContractMetrics."""
    if kind.is_derivative:
        return ContractMetrics(to_decimal(contract_multiplier))
    return DEFAULT_METRICS
