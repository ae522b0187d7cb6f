"""
Tests for holdings_core.metrics and holdings_core.position: variants, dispatch, Position.
"""

from decimal import Decimal

import pytest

from holdings_core import ContractMetrics, Holding, InstrumentKind, Position, PositionMetrics, metrics_for


# --- Position ---


def test_position_is_immutable():
    p = Position(Decimal("10"), 5)
    with pytest.raises(AttributeError):
        p.quantity = 6


def test_position_coerces_inputs():
    p = Position("10.50", 3)
    assert p.average_price == Decimal("10.50")
    assert p.quantity == 3


def test_position_flat():
    p = Position.flat()
    assert p.is_flat
    assert not p.is_long and not p.is_short
    assert p.absolute_quantity == 0


# --- Default metrics ---


def test_default_close_gross_long_and_short():
    m = PositionMetrics()
    assert m.close_gross(Position(Decimal("10"), 4), Decimal("12")) == Decimal("8")
    assert m.close_gross(Position(Decimal("10"), -4), Decimal("12")) == Decimal("-8")
    assert m.close_gross(Position(Decimal("10"), 0), Decimal("12")) == 0


# --- ContractMetrics ---


def test_contract_metrics_scales_by_multiplier():
    m = ContractMetrics(Decimal("100"))
    p = Position(Decimal("3.20"), -2)
    assert m.holdings_cost(p) == Decimal("-640")
    assert m.holdings_value(p, Decimal("2.75")) == Decimal("-550")
    assert m.close_gross(p, Decimal("2.75")) == Decimal("90")


def test_contract_metrics_rejects_non_positive_multiplier():
    with pytest.raises(ValueError):
        ContractMetrics(Decimal("0"))
    with pytest.raises(ValueError):
        ContractMetrics(-5)


def test_contract_metrics_with_unit_multiplier_matches_default():
    p = Position(Decimal("7"), 9)
    price = Decimal("8.5")
    default = PositionMetrics()
    unit = ContractMetrics(1)
    assert unit.holdings_cost(p) == default.holdings_cost(p)
    assert unit.holdings_value(p, price) == default.holdings_value(p, price)
    assert unit.close_gross(p, price) == default.close_gross(p, price)


# --- Dispatch ---


@pytest.mark.parametrize("kind", [InstrumentKind.OPTION, InstrumentKind.FUTURE])
def test_metrics_for_derivatives(kind):
    m = metrics_for(kind, contract_multiplier=50)
    assert isinstance(m, ContractMetrics)
    assert m.multiplier == Decimal("50")


@pytest.mark.parametrize(
    "kind",
    [InstrumentKind.BASE, InstrumentKind.EQUITY, InstrumentKind.FOREX, InstrumentKind.CFD, InstrumentKind.CRYPTO],
)
def test_metrics_for_non_derivatives_use_default(kind):
    m = metrics_for(kind)
    assert type(m) is PositionMetrics


def test_holding_picks_metrics_from_kind(fee_stub):
    assert isinstance(Holding("ES", fee_stub(), InstrumentKind.FUTURE).metrics, ContractMetrics)
    assert type(Holding("SPY", fee_stub()).metrics) is PositionMetrics


def test_option_holding_uses_multiplier_in_close_profit(fee_stub):
    stub = fee_stub("1.30")
    h = Holding(
        "SPY 250620C500",
        stub,
        InstrumentKind.OPTION,
        metrics=metrics_for(InstrumentKind.OPTION, contract_multiplier=100),
    )
    h.set_holdings(Decimal("3.20"), -2)
    h.update_price(Decimal("2.75"))
    assert h.holdings_cost == Decimal("-640")
    assert h.holdings_value == Decimal("-550")
    assert h.unrealized_profit == Decimal("88.70")
    # Fee model sees contracts, not underlying units
    assert stub.calls == [(Decimal(2), Decimal("2.75"))]
