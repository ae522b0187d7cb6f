"""
Holdings report: print a per-symbol summary of holdings.
"""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from holdings_core import Holding, HoldingSnapshot
from reporting.frame import holdings_frame, open_positions


def print_holdings_report(
    holdings: Iterable[Holding | HoldingSnapshot],
    *,
    include_flat: bool = True,
) -> pd.DataFrame:
    """
    Snapshot the holdings and print one block per symbol.

    Parameters
    ----------
    holdings : iterable of Holding or HoldingSnapshot
        Holdings to report.
    include_flat : bool
        Also print holdings with zero quantity (their realized P&L and fees
        still count). Default True.

    Returns
    -------
    pd.DataFrame
        The holdings_frame that was printed (e.g. for programmatic use).
    """
    df = holdings_frame(holdings)
    if not include_flat:
        df = open_positions(df)
    print("--- Holdings ---")
    if df.empty:
        print("(no holdings)")
    for symbol, row in df.iterrows():
        side = "long" if row["quantity"] > 0 else "short" if row["quantity"] < 0 else "flat"
        print(f"{symbol} [{row['instrument_kind']}] {side} {abs(row['quantity'])} @ {row['average_price']:,.2f}")
        print(f"  Price:           {row['price']:,.2f}")
        print(f"  Holdings cost:   {row['holdings_cost']:,.2f}")
        print(f"  Holdings value:  {row['holdings_value']:,.2f}")
        print(f"  Unrealized PnL:  {row['unrealized_profit']:,.2f}")
        print(f"  Realized PnL:    {row['profit']:,.2f}")
        print(f"  Fees:            {row['total_fees']:,.2f}")
        print(f"  Net profit:      {row['net_profit']:,.2f}")
        print(f"  Sale volume:     {row['total_sale_volume']:,.2f}")
    print("----------------")
    return df
