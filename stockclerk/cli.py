"""Typer CLI interface for Stock Clerk."""

import logging
from datetime import date, datetime
from pathlib import Path

import typer
from rich.console import Console

from stockclerk.engines.brackets import DEFAULT_TAX_YEAR
from stockclerk.exceptions import StockClerkError
from stockclerk.models.taxes import TaxTable
from stockclerk.pricing import DEFAULT_PRICE_URL

BANNER = """\
  Stock Clerk
  Exercise, sell, and see what the brackets leave you.
"""

app = typer.Typer(
    name="stockclerk",
    help="Stock Clerk: exercise-and-sell calculator for stock option grants.",
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Stock Clerk: exercise-and-sell calculator for stock option grants."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(BANNER)
        raise typer.Exit()


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _load_tax_table(tax_year: int, tax_table: Path | None) -> TaxTable:
    """Load a custom table from JSON, or the bundled table for ``tax_year``."""
    if tax_table is None:
        from stockclerk.engines.brackets import tax_table_for_year

        return tax_table_for_year(tax_year)

    from stockclerk.ingestion.tax_table import TaxTableAdapter

    adapter = TaxTableAdapter()
    table = adapter.parse(tax_table)
    for warning in adapter.validate(table):
        typer.echo(f"Warning: {warning}", err=True)
    return table


@app.command()
def calculate(
    file: Path = typer.Argument(..., help="User data JSON file"),
    exercise_date: datetime | None = typer.Option(
        None,
        "--date",
        "-d",
        formats=["%Y-%m-%d"],
        help="Exercise date (YYYY-MM-DD). Defaults to today",
    ),
    price: float | None = typer.Option(
        None,
        "--price",
        "-p",
        help="Share price. Defaults to the current share price of --ticker",
    ),
    ticker: str | None = typer.Option(
        None,
        "--ticker",
        "-t",
        envvar="STOCKCLERK_TICKER",
        help="Ticker to fetch the current share price for",
    ),
    price_url: str = typer.Option(
        DEFAULT_PRICE_URL,
        "--price-url",
        envvar="STOCKCLERK_PRICE_URL",
        help="Quote endpoint; '{ticker}' is replaced with the ticker",
    ),
    tax_year: int = typer.Option(
        DEFAULT_TAX_YEAR,
        "--tax-year",
        "-y",
        envvar="STOCKCLERK_TAX_YEAR",
        help="Bundled federal tax table to use",
    ),
    tax_table: Path | None = typer.Option(
        None,
        "--tax-table",
        help="Custom tax table JSON file (overrides --tax-year)",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    summary: Path | None = typer.Option(
        None,
        "--summary",
        help="Also write a plain-text summary to this file",
    ),
) -> None:
    """Calculate the outcome of exercising and selling all vested shares."""
    from stockclerk.engines.clerk import StockClerk
    from stockclerk.ingestion.user_data import UserDataAdapter
    from stockclerk.models.money import Money

    if price is None and ticker is None:
        raise _fail("Pass --price, or --ticker to fetch the current share price.")

    when = exercise_date.date() if exercise_date is not None else date.today()
    adapter = UserDataAdapter()
    try:
        user_data = adapter.parse(file)
        table = _load_tax_table(tax_year, tax_table)
        if price is not None:
            share_price = Money.new(price)
        else:
            from stockclerk.pricing import fetch_share_price

            share_price = fetch_share_price(ticker, url_template=price_url)
        for warning in adapter.validate(user_data, when):
            typer.echo(f"Warning: {warning}", err=True)
        calculation = StockClerk(table).calculate(
            user_data.filer, user_data.grants, when, share_price
        )
    except (StockClerkError, FileNotFoundError, ValueError) as exc:
        raise _fail(str(exc))

    if json_output:
        typer.echo(calculation.model_dump_json(indent=2))
    else:
        from stockclerk.reports.console import render_calculation

        render_calculation(calculation, Console())

    if summary is not None:
        from stockclerk.reports.summary import CalculationSummaryGenerator

        written = CalculationSummaryGenerator().write(calculation, summary)
        typer.echo(f"Summary written to {written}", err=True)


@app.command()
def schedule(
    file: Path = typer.Argument(..., help="User data JSON file"),
) -> None:
    """Show when each grant's shares vest."""
    from stockclerk.engines.vesting import vesting_schedule
    from stockclerk.ingestion.user_data import UserDataAdapter
    from stockclerk.reports.console import render_schedule

    try:
        user_data = UserDataAdapter().parse(file)
    except (StockClerkError, FileNotFoundError) as exc:
        raise _fail(str(exc))

    if not user_data.grants:
        typer.echo("No grants found.")
        return
    console = Console()
    for grant in dict.fromkeys(user_data.grants):
        render_schedule(grant, vesting_schedule(grant), console)


@app.command()
def brackets(
    tax_year: int = typer.Option(
        DEFAULT_TAX_YEAR,
        "--tax-year",
        "-y",
        envvar="STOCKCLERK_TAX_YEAR",
        help="Bundled federal tax table to show",
    ),
    filing_status: str = typer.Option(
        "SINGLE",
        "--filing-status",
        "-s",
        help="Filing status: SINGLE, MFJ, MFS, HOH",
    ),
    tax_table: Path | None = typer.Option(
        None,
        "--tax-table",
        help="Custom tax table JSON file (overrides --tax-year)",
    ),
) -> None:
    """Show the tax brackets for a filing status."""
    from stockclerk.models.enums import FilingStatus
    from stockclerk.reports.console import render_brackets

    try:
        status = FilingStatus.parse(filing_status)
        table = _load_tax_table(tax_year, tax_table)
    except (StockClerkError, FileNotFoundError, ValueError) as exc:
        raise _fail(str(exc))

    render_brackets(tax_year, status, table.for_status(status), Console())
