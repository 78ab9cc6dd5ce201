"""Rich console rendering for calculations, schedules and bracket tables."""

from rich.console import Console
from rich.table import Table

from stockclerk.engines.vesting import VestingEvent
from stockclerk.models.calculation import StockCalculation
from stockclerk.models.enums import FilingStatus
from stockclerk.models.equity import StockPosition
from stockclerk.models.grant import Grant
from stockclerk.models.taxes import TaxInformation


def _profit(position: StockPosition) -> str:
    if position.is_underwater:
        return f"-{position.cost - position.revenue}"
    return str(position.gross_profit)


def render_calculation(calc: StockCalculation, console: Console) -> None:
    """Print grants, the taxed-amount breakdown and totals."""
    console.print(
        f"Share value [bold]{calc.share_price}[/bold] on {calc.exercise_date.isoformat()} "
        f"({calc.filing_status.value}, income {calc.income})"
    )

    grants = Table(title="Grants")
    grants.add_column("Start")
    grants.add_column("Price", justify="right")
    grants.add_column("Total", justify="right")
    grants.add_column("Vested", justify="right")
    grants.add_column("Unvested", justify="right")
    grants.add_column("Vested Cost", justify="right")
    grants.add_column("Vested Revenue", justify="right")
    grants.add_column("Gross Profit", justify="right")
    for position in calc.positions:
        grant, vested = position.grant, position.equity.vested
        grants.add_row(
            grant.start.isoformat(),
            str(grant.price),
            f"{grant.total:,}",
            f"{vested.count:,}",
            f"{position.equity.unvested.count:,}",
            str(vested.cost),
            str(vested.revenue),
            _profit(vested),
        )
    console.print(grants)

    taxes = Table(title="Taxes on Profit")
    taxes.add_column("Rate", justify="right")
    taxes.add_column("Amount", justify="right")
    taxes.add_column("Taxes", justify="right")
    for taxed in calc.taxes:
        taxes.add_row(f"{taxed.rate}%", str(taxed.amount), str(taxed.taxes))
    console.print(taxes)

    totals = Table(title="Selling All Vested", show_header=False)
    totals.add_column("Item")
    totals.add_column("Value", justify="right")
    totals.add_row("Vested Shares", f"{calc.vested.count:,}")
    totals.add_row("Unvested Shares", f"{calc.unvested.count:,}")
    totals.add_row("Exercise Cost", str(calc.exercise_cost))
    totals.add_row("Gross Profit", str(calc.gross_profit))
    totals.add_row("Taxes", str(calc.total_taxes))
    totals.add_row("[bold]Net Profit[/bold]", f"[bold]{calc.net_profit}[/bold]")
    totals.add_row("Break-even Shares to Sell", f"{calc.break_even_shares:,}")
    console.print(totals)


def render_schedule(grant: Grant, events: list[VestingEvent], console: Console) -> None:
    table = Table(title=f"Vesting: {grant}")
    table.add_column("Vests On")
    table.add_column("Months", justify="right")
    table.add_column("Vested Shares", justify="right")
    table.add_column("Fraction", justify="right")
    for event in events:
        table.add_row(
            event.vests_on.isoformat(),
            str(event.elapsed_months),
            f"{event.vested_shares:,}",
            f"{event.fraction:.2%}",
        )
    console.print(table)


def render_brackets(
    year: int, status: FilingStatus, info: TaxInformation, console: Console
) -> None:
    table = Table(title=f"{year} Federal Brackets ({status.value}, deduction {info.deduction})")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("LTCG Rate", justify="right")
    table.add_column("Base Amount", justify="right")
    for bracket, upper in info.ranges():
        table.add_row(
            str(bracket.start),
            "and up" if upper is None else str(upper),
            f"{bracket.rate}%",
            f"{bracket.capital_gain_rate}%",
            str(bracket.base_amount),
        )
    console.print(table)
