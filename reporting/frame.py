"""
Tabular export of holdings for reporting and risk collaborators.

One row per holding, indexed by symbol. No cross-holding totals: aggregation
belongs to the portfolio layer.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from holdings_core import Holding, HoldingSnapshot

# Column order for holdings_frame; symbol becomes the index.
COLUMNS = (
    "symbol",
    "instrument_kind",
    "quantity",
    "average_price",
    "price",
    "holdings_cost",
    "holdings_value",
    "unrealized_profit",
    "profit",
    "total_fees",
    "net_profit",
    "last_trade_profit",
    "total_sale_volume",
)

# Decimal columns converted to float when as_float=True.
MONEY_COLUMNS = COLUMNS[3:]


def holdings_frame(
    holdings: Iterable[Holding | HoldingSnapshot],
    *,
    as_float: bool = False,
) -> pd.DataFrame:
    """
    Build a DataFrame of holding snapshots.

    Parameters
    ----------
    holdings : iterable of Holding or HoldingSnapshot
        Live holdings are snapshotted first, so each row is self-consistent.
    as_float : bool
        Convert Decimal money columns to float (for plotting / numeric ops).
        Default keeps exact Decimal values (object dtype).

    Returns
    -------
    pd.DataFrame
        Index 'symbol'; columns as in COLUMNS minus symbol. Empty frame with
        the same columns when no holdings are given.
    """
    rows = []
    for h in holdings:
        snap = h.snapshot() if isinstance(h, Holding) else h
        rows.append(snap.as_dict())
    df = pd.DataFrame(rows, columns=list(COLUMNS))
    if as_float and not df.empty:
        df[list(MONEY_COLUMNS)] = df[list(MONEY_COLUMNS)].astype(float)
    df = df.set_index("symbol")
    return df


def open_positions(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a holdings_frame with a non-zero quantity."""
    return df[df["quantity"] != 0]
