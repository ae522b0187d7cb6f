"""
Tests for holdings_core.fees: FeeModel interface and the boundary implementations.
"""

from decimal import Decimal

import pytest

from holdings_core import FeeModel, FlatFeeModel, Holding, ZeroFeeModel


def test_fee_model_is_abstract():
    with pytest.raises(TypeError):
        FeeModel()


def test_zero_fee_model():
    assert ZeroFeeModel().get_fee(Decimal(100), Decimal("50")) == 0


def test_flat_fee_model_ignores_size_and_price():
    m = FlatFeeModel("1.00")
    assert m.get_fee(Decimal(1), Decimal("1")) == Decimal("1.00")
    assert m.get_fee(Decimal(10_000), Decimal("500")) == Decimal("1.00")
    assert "1.00" in repr(m)


def test_duck_typed_fee_model_float_result_is_coerced():
    class HalfPercent:
        def get_fee(self, quantity, price):
            return float(quantity * price) * 0.005

    h = Holding("SPY", HalfPercent())
    h.set_holdings(Decimal("10"), 100)
    h.update_price(Decimal("10"))
    assert h.unrealized_profit == Decimal("-5.0")
    assert isinstance(h.unrealized_profit, Decimal)


def test_fee_model_is_shared_not_mutated():
    model = FlatFeeModel(Decimal("2"))
    a = Holding("A", model)
    b = Holding("B", model)
    a.set_holdings(Decimal("1"), 10)
    b.set_holdings(Decimal("1"), -10)
    a.update_price(Decimal("2"))
    b.update_price(Decimal("2"))
    assert a.unrealized_profit == Decimal("8")
    assert b.unrealized_profit == Decimal("-12")
    assert a.fee_model is b.fee_model
    assert model.fee == Decimal("2")
