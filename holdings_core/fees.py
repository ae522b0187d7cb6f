"""
FeeModel: interface for the transaction cost capability a holding consumes.

The holding only asks for an estimated fee on a hypothetical closing trade.
Real cost models live outside this package and implement get_fee; the two
implementations here cover the no-fee and fixed-ticket cases.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from holdings_core.position import ZERO, Number, to_decimal


class FeeModel(ABC):
    """
    Base class for fee models. Must be reentrant and must not mutate the
    holding that calls it.
    """

    @abstractmethod
    def get_fee(self, quantity: Decimal, price: Decimal) -> Decimal:
        """
        Fee for trading an absolute quantity at price. Quantity is always
        positive when called by a holding; the result must be non-negative.
        """
        ...


class ZeroFeeModel(FeeModel):
    """No transaction costs."""

    def get_fee(self, quantity: Decimal, price: Decimal) -> Decimal:
        return ZERO


class FlatFeeModel(FeeModel):
    """Fixed fee per order regardless of size or price."""

    def __init__(self, fee: Number) -> None:
        self.fee = to_decimal(fee)

    def get_fee(self, quantity: Decimal, price: Decimal) -> Decimal:
        return self.fee

    def __repr__(self) -> str:
        return f"FlatFeeModel(fee={self.fee})"
