"""
holdings-core: per-instrument position and P&L accounting for trading systems.

No order routing, market data, or portfolio aggregation. A Holding only
accumulates and derives from the fills, prices and fees it is given.
"""

__version__ = "0.1.0"

from holdings_core.instrument import InstrumentKind
from holdings_core.position import Position
from holdings_core.fees import FeeModel, FlatFeeModel, ZeroFeeModel
from holdings_core.metrics import ContractMetrics, PositionMetrics, metrics_for
from holdings_core.contracts import ContractViolation
from holdings_core.types import HoldingSnapshot
from holdings_core.holding import Holding

__all__ = [
    "InstrumentKind",
    "Position",
    "FeeModel",
    "FlatFeeModel",
    "ZeroFeeModel",
    "PositionMetrics",
    "ContractMetrics",
    "metrics_for",
    "ContractViolation",
    "HoldingSnapshot",
    "Holding",
]
