"""
Holding lifecycle demo: open, mark, close and reopen positions.

Demonstrates: fills → set_holdings / add_new_sale / add_new_fee → price ticks →
unrealized and realized P&L → holdings report. The fill arithmetic here stands
in for the portfolio's fill processor.
"""

from decimal import Decimal

from holdings_core import FlatFeeModel, Holding, InstrumentKind, metrics_for
from reporting import print_holdings_report


def main() -> None:
    # Fixed $1 ticket fee for every order
    fee_model = FlatFeeModel(Decimal("1.00"))

    spy = Holding("SPY", fee_model)
    option = Holding(
        "SPY 250620C500",
        fee_model,
        InstrumentKind.OPTION,
        metrics=metrics_for(InstrumentKind.OPTION, contract_multiplier=100),
    )

    # Buy 100 SPY @ 400
    spy.set_holdings(Decimal("400.00"), 100)
    spy.add_new_sale(Decimal("40000.00"))
    spy.add_new_fee(fee_model.get_fee(Decimal(100), Decimal("400.00")))
    spy.update_price(Decimal("405.50"))
    print(f"SPY unrealized after tick: {spy.unrealized_profit:,.2f}")

    # Sell all 100 @ 410: realize (410 - 400) * 100
    spy.add_new_sale(Decimal("41000.00"))
    spy.add_new_fee(fee_model.get_fee(Decimal(100), Decimal("410.00")))
    spy.add_new_profit(Decimal("1000.00"))
    spy.set_last_trade_profit(Decimal("1000.00"))
    spy.set_holdings(Decimal("0"), 0)
    spy.update_price(Decimal("410.00"))

    # Short 2 option contracts @ 3.20, mark at 2.75
    option.set_holdings(Decimal("3.20"), -2)
    option.add_new_sale(Decimal("640.00"))
    option.add_new_fee(fee_model.get_fee(Decimal(2), Decimal("3.20")))
    option.update_price(Decimal("2.75"))

    print_holdings_report([spy, option])


if __name__ == "__main__":
    main()
