"""
Holding: position, price and P&L accounting for a single instrument.

One Holding per traded symbol. The fill processor mutates it after every fill
and price tick; reporting and risk read derived metrics at any time. Values
are Decimal throughout. Single writer; no internal locking.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from holdings_core.contracts import check_integral, check_non_negative
from holdings_core.fees import FeeModel
from holdings_core.instrument import InstrumentKind
from holdings_core.metrics import PositionMetrics, metrics_for
from holdings_core.position import ZERO, Number, Position, to_decimal
from holdings_core.types import HoldingSnapshot

logger = logging.getLogger(__name__)


class Holding:
    """
    Mutable holding record. Symbol, kind, fee model and metrics are bound at
    construction and never change; everything else moves through the mutators.

    Cost/value formulas come from `metrics` (default: chosen from the
    instrument kind via metrics_for). The fee model is only consulted when
    estimating the profit of closing a non-flat position.
    """

    def __init__(
        self,
        symbol: str,
        fee_model: FeeModel,
        instrument_kind: InstrumentKind = InstrumentKind.EQUITY,
        *,
        metrics: PositionMetrics | None = None,
        strict: bool | None = None,
    ) -> None:
        self._symbol = symbol
        self._instrument_kind = instrument_kind
        self._fee_model = fee_model
        self._metrics = metrics if metrics is not None else metrics_for(instrument_kind)
        self._strict = strict

        self._position = Position.flat()
        self._price = ZERO
        self._total_sale_volume = ZERO
        self._profit = ZERO
        self._last_trade_profit = ZERO
        self._total_fees = ZERO

    # --- Identity ---

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def instrument_kind(self) -> InstrumentKind:
        return self._instrument_kind

    @property
    def fee_model(self) -> FeeModel:
        return self._fee_model

    @property
    def metrics(self) -> PositionMetrics:
        return self._metrics

    # --- Stored state ---

    @property
    def position(self) -> Position:
        """Current (average_price, quantity) pair, replaced wholesale on each fill."""
        return self._position

    @property
    def quantity(self) -> int:
        """Signed quantity: positive long, negative short, zero flat."""
        return self._position.quantity

    @property
    def average_price(self) -> Decimal:
        return self._position.average_price

    @property
    def price(self) -> Decimal:
        """Last known market price. Zero until the first update_price."""
        return self._price

    @property
    def total_sale_volume(self) -> Decimal:
        """Gross traded value since construction."""
        return self._total_sale_volume

    @property
    def profit(self) -> Decimal:
        """Sum of realized profit/loss events, before fees."""
        return self._profit

    @property
    def cumulative_profit(self) -> Decimal:
        """Alias of profit."""
        return self._profit

    @property
    def last_trade_profit(self) -> Decimal:
        """Profit recorded for the most recent closing fill."""
        return self._last_trade_profit

    @property
    def total_fees(self) -> Decimal:
        return self._total_fees

    # --- Derived metrics ---

    @property
    def holdings_cost(self) -> Decimal:
        """Acquisition cost of the position. Negative when short."""
        return self._metrics.holdings_cost(self._position)

    @property
    def absolute_holdings_cost(self) -> Decimal:
        return abs(self.holdings_cost)

    @property
    def holdings_value(self) -> Decimal:
        """Market value of the position at the last price."""
        return self._metrics.holdings_value(self._position, self._price)

    @property
    def absolute_holdings_value(self) -> Decimal:
        return abs(self.holdings_value)

    @property
    def absolute_quantity(self) -> int:
        return self._position.absolute_quantity

    @property
    def is_long(self) -> bool:
        return self._position.is_long

    @property
    def is_short(self) -> bool:
        return self._position.is_short

    @property
    def holds_position(self) -> bool:
        return self.absolute_quantity > 0

    @property
    def is_invested(self) -> bool:
        """Alias of holds_position."""
        return self.holds_position

    @property
    def net_profit(self) -> Decimal:
        """Realized profit less every fee paid."""
        return self._profit - self._total_fees

    @property
    def unrealized_profit(self) -> Decimal:
        """Net profit if the position were closed now. Zero when flat."""
        return self.compute_close_profit()

    # --- Mutators ---

    def set_holdings(self, average_price: Number, quantity: int) -> None:
        """Replace cost basis and size after processing a fill. Overwrites."""
        check_integral(self._symbol, "quantity", quantity)
        new_position = Position(to_decimal(average_price), quantity)
        check_non_negative(self._symbol, "average_price", new_position.average_price, strict=self._strict)
        previous = self._position
        self._position = new_position
        if previous.is_flat and not new_position.is_flat:
            logger.debug("%s opened: qty=%s avg=%s", self._symbol, new_position.quantity, new_position.average_price)
        elif not previous.is_flat and new_position.is_flat:
            logger.debug("%s flattened from qty=%s", self._symbol, previous.quantity)
        else:
            logger.debug("%s holdings set: qty=%s avg=%s", self._symbol, new_position.quantity, new_position.average_price)

    def update_price(self, price: Number) -> None:
        """Replace the last known market price."""
        self._price = to_decimal(price)

    def add_new_fee(self, fee: Number) -> None:
        """Add a paid fee to the running total."""
        fee = to_decimal(fee)
        check_non_negative(self._symbol, "fee", fee, strict=self._strict)
        self._total_fees += fee

    def add_new_profit(self, amount: Number) -> None:
        """Add a realized profit (or loss, if negative) from a closing fill."""
        self._profit += to_decimal(amount)

    def add_new_sale(self, value: Number) -> None:
        """Add the gross value of a fill to the running trade volume."""
        value = to_decimal(value)
        check_non_negative(self._symbol, "sale_value", value, strict=self._strict)
        self._total_sale_volume += value

    def set_last_trade_profit(self, amount: Number) -> None:
        """Record the profit of the latest closing fill. Overwrites."""
        self._last_trade_profit = to_decimal(amount)

    # --- Close profit ---

    def compute_close_profit(self) -> Decimal:
        """
        Profit if the whole position were closed right now, net of an estimated fee.

        The fee is the fee model's quote for the full absolute quantity at the
        last price, not a market-fill estimate; an actual closing trade may pay
        a different fee. Flat positions return zero without calling the fee model.
        """
        position = self._position
        if position.absolute_quantity == 0:
            return ZERO
        estimated_fee = to_decimal(self._fee_model.get_fee(Decimal(position.absolute_quantity), self._price))
        return self._metrics.close_gross(position, self._price) - estimated_fee

    # --- Read model ---

    def snapshot(self) -> HoldingSnapshot:
        """Immutable copy of state and derived metrics."""
        position = self._position
        price = self._price
        return HoldingSnapshot(
            symbol=self._symbol,
            instrument_kind=self._instrument_kind,
            quantity=position.quantity,
            average_price=position.average_price,
            price=price,
            holdings_cost=self.holdings_cost,
            holdings_value=self.holdings_value,
            unrealized_profit=self.compute_close_profit(),
            profit=self._profit,
            total_fees=self._total_fees,
            net_profit=self.net_profit,
            last_trade_profit=self._last_trade_profit,
            total_sale_volume=self._total_sale_volume,
        )

    def __repr__(self) -> str:
        return (
            f"Holding(symbol={self._symbol!r}, kind={self._instrument_kind.value}, "
            f"quantity={self.quantity}, average_price={self.average_price}, price={self._price})"
        )
