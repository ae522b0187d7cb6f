"""
Reporting helpers on top of holdings-core.

Snapshots holdings into pandas DataFrames and prints per-symbol summaries
for reporting and risk collaborators.
"""

from reporting.frame import holdings_frame, open_positions
from reporting.holdings_report import print_holdings_report

__all__ = [
    "holdings_frame",
    "open_positions",
    "print_holdings_report",
]
