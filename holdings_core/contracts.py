"""
Caller contract checks for holding mutators.

Holdings do not validate their inputs: the fill processor that calls them
owns that. Breaches are never clamped. By default they are applied as given
and logged; with HOLDINGS_STRICT_CONTRACTS=true (or strict=True on the
holding) they raise ContractViolation and the holding is left untouched.
A quantity that is not a whole number always raises: an int position cannot
hold it unchanged.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal

logger = logging.getLogger(__name__)

# Environment variable that must be set to "true" to raise on contract breaches.
STRICT_CONTRACTS_ENV = "HOLDINGS_STRICT_CONTRACTS"


class ContractViolation(ValueError):
    """A mutator was called with a value its caller promised never to pass."""

    def __init__(self, symbol: str, field: str, value: object, requirement: str = "non-negative") -> None:
        self.symbol = symbol
        self.field = field
        self.value = value
        super().__init__(f"{symbol}: {field} must be {requirement}, got {value}")


def strict_contracts_enabled() -> bool:
    """Read the strict-mode switch from the environment (at call time)."""
    return os.environ.get(STRICT_CONTRACTS_ENV, "").lower() == "true"


def check_non_negative(symbol: str, field: str, value: Decimal, *, strict: bool | None = None) -> None:
    """
    Raise or warn when value is negative. strict=None defers to the environment.
    Returns normally for valid input and for non-strict breaches.
    """
    if value >= 0:
        return
    if strict is None:
        strict = strict_contracts_enabled()
    if strict:
        raise ContractViolation(symbol, field, value)
    logger.warning("Contract breach on %s: %s=%s is negative; applied unchanged", symbol, field, value)


def check_integral(symbol: str, field: str, value: object) -> None:
    """
    Raise when value is not a whole number. An int field cannot hold 2.9
    unmodified, so this raises in both strict and non-strict mode.
    """
    try:
        integral = value == int(value)
    except (TypeError, ValueError, OverflowError):
        integral = False
    if not integral:
        raise ContractViolation(symbol, field, value, "a whole number")
