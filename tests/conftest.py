"""
Shared fixtures: deterministic fee stub and a clean strict-mode environment.
"""

from decimal import Decimal

import pytest

from holdings_core import FeeModel
from holdings_core.contracts import STRICT_CONTRACTS_ENV


class StubFeeModel(FeeModel):
    """Returns a fixed fee and records every (quantity, price) it was asked about."""

    def __init__(self, fee: Decimal = Decimal("0")) -> None:
        self.fee = fee
        self.calls: list[tuple[Decimal, Decimal]] = []

    def get_fee(self, quantity: Decimal, price: Decimal) -> Decimal:
        self.calls.append((quantity, price))
        return self.fee


@pytest.fixture(autouse=True)
def _no_strict_env(monkeypatch):
    monkeypatch.delenv(STRICT_CONTRACTS_ENV, raising=False)


@pytest.fixture
def fee_stub():
    """Build a StubFeeModel charging the given fee: fee_stub("5.00")."""

    def make(fee: str = "0") -> StubFeeModel:
        return StubFeeModel(Decimal(fee))

    return make
