"""
Instrument classification.

A holding is bound to exactly one kind at construction; the kind selects
which cost/value math applies (see holdings_core.metrics).
"""

from enum import Enum


class InstrumentKind(Enum):
    BASE = "base"
    EQUITY = "equity"
    OPTION = "option"
    FUTURE = "future"
    FOREX = "forex"
    CFD = "cfd"
    CRYPTO = "crypto"

    @property
    def is_derivative(self) -> bool:
        """True for contract instruments quoted per unit of underlying."""
        return self in (InstrumentKind.OPTION, InstrumentKind.FUTURE)
