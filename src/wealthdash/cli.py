"""
WealthDash CLI — command-line interface.

Usage:
    wealthdash summary --data snapshot.json --currency INR
    wealthdash budgets --data snapshot.json --month 2024-05
    wealthdash portfolio --data snapshot.yaml --currency EUR
    wealthdash currencies
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import NoReturn

import typer
from pydantic import ValidationError as ModelValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wealthdash import __version__
from wealthdash.exceptions import WealthDashError

app = typer.Typer(
    name="wealthdash",
    help="💰 WealthDash — personal finance at a glance",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]WealthDash[/bold] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """💰 WealthDash — budgets, net worth and portfolio from a snapshot file."""


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


def _load(data: str, config: str | None, currency: str | None):  # noqa: ANN202
    """Load config and snapshot, turning engine errors into a clean exit."""
    from wealthdash.dashboard import Dashboard
    from wealthdash.models.snapshot import FinancialSnapshot

    try:
        dashboard = Dashboard.from_config(config, display_currency=currency)
        _setup_logging(dashboard.config.log_level)
        snapshot = FinancialSnapshot.load(data)
    except (WealthDashError, FileNotFoundError, ModelValidationError) as exc:
        _fail(str(exc))
    return dashboard, snapshot


def _parse_month(month: str | None) -> datetime:
    if not month:
        return datetime.now()
    try:
        return datetime.strptime(month, "%Y-%m")
    except ValueError:
        _fail(f"--month must look like YYYY-MM, got {month!r}")


@app.command()
def summary(
    data: str = typer.Option(..., "--data", "-d", help="Snapshot file (.json or .yaml)"),
    currency: str = typer.Option(None, "--currency", "-c", help="Display currency code"),
    config: str = typer.Option(None, "--config", help="Path to config file"),
    month: str = typer.Option(None, "--month", "-m", help="Budget month as YYYY-MM (default: this month)"),
) -> None:
    """Show net worth, cash flow and budget health."""
    dashboard, snapshot = _load(data, config, currency)
    now = _parse_month(month)

    try:
        result = dashboard.summarize(snapshot, now=now)
    except WealthDashError as exc:
        _fail(str(exc))

    fmt = dashboard.converter.format
    console.print(Panel.fit(
        "[bold blue]💰 WealthDash[/bold blue] — Dashboard",
        subtitle=f"v{__version__}",
    ))

    table = Table(title="Summary", show_lines=True)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Net Worth", fmt(result.valuation.net_worth))
    if not result.valuation.has_connected_data:
        table.add_row("", "[dim]estimated, no linked accounts[/dim]")
    table.add_row("Total Income", fmt(result.total_income))
    table.add_row("Total Expenses", fmt(result.total_expense))
    table.add_row("Bank Assets", fmt(result.valuation.asset_total))
    table.add_row("Liabilities", fmt(result.valuation.liability_total))
    table.add_row("Portfolio Value", fmt(result.valuation.portfolio_value))
    table.add_row("Estimated Tax", fmt(result.estimated_tax))
    table.add_row("Monthly SIPs", dashboard.converter.format_converted(result.display_sip_commitment))
    table.add_row(
        "Budgets Over Limit",
        f"{result.budget_summary.over_budget_count}/{result.budget_summary.budget_count}",
    )
    console.print(table)

    if result.payment_breakdown:
        console.print("[bold]Spending by payment method:[/bold]")
        for row in result.payment_breakdown:
            console.print(f"  {row.label:<8} {fmt(row.total)}")

    if result.upcoming_sips:
        console.print("[bold]Upcoming SIP deductions:[/bold]")
        for sip in result.upcoming_sips:
            console.print(
                f"  {escape(sip.name)} on {sip.next_date:%b %d}: "
                f"{dashboard.converter.format_converted(sip.amount)}"
            )


@app.command()
def budgets(
    data: str = typer.Option(..., "--data", "-d", help="Snapshot file (.json or .yaml)"),
    month: str = typer.Option(None, "--month", "-m", help="Month as YYYY-MM (default: this month)"),
    config: str = typer.Option(None, "--config", help="Path to config file"),
) -> None:
    """Show spend against each monthly budget."""
    from wealthdash.analyzers.budget import analyze_budgets

    _, snapshot = _load(data, config, None)
    now = _parse_month(month)

    try:
        rows = analyze_budgets(snapshot.budgets, snapshot.transactions, now)
    except WealthDashError as exc:
        _fail(str(exc))

    if not rows:
        console.print("[dim]No budgets set.[/dim]")
        return

    table = Table(title=f"Monthly Budgets — {now:%B %Y}")
    table.add_column("Category", style="bold")
    table.add_column("Spent", justify="right")
    table.add_column("Limit", justify="right")
    table.add_column("Used", justify="right")
    table.add_column("Status")

    for row in rows:
        if row.is_over:
            status = f"[red]Over by ${row.over_by:,.2f}[/red]"
        elif row.percentage >= 75:
            status = "[yellow]Close to limit[/yellow]"
        else:
            status = "[green]On track[/green]"
        table.add_row(
            row.category,
            f"${row.spent:,.2f}",
            f"${row.limit:,.2f}",
            f"{row.percentage:.0f}%",
            status,
        )
    console.print(table)


@app.command()
def portfolio(
    data: str = typer.Option(..., "--data", "-d", help="Snapshot file (.json or .yaml)"),
    currency: str = typer.Option(None, "--currency", "-c", help="Display currency code"),
    config: str = typer.Option(None, "--config", help="Path to config file"),
) -> None:
    """Show holdings with gains, in the chosen currency."""
    from wealthdash.analyzers.valuation import holding_gain, summarize_portfolio

    dashboard, snapshot = _load(data, config, currency)
    converter = dashboard.converter

    try:
        totals = summarize_portfolio(snapshot.investments, converter.code)
        gains = [holding_gain(inv) for inv in snapshot.investments]
    except WealthDashError as exc:
        _fail(str(exc))

    table = Table(title=f"Portfolio ({converter.code})")
    table.add_column("Symbol", style="bold cyan")
    table.add_column("Shares", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Value", justify="right")
    table.add_column("Gain", justify="right")

    for inv, gain in zip(snapshot.investments, gains):
        color = "green" if gain.gain >= 0 else "red"
        table.add_row(
            inv.symbol,
            f"{inv.shares:g}",
            converter.format(inv.current_price),
            converter.format(inv.market_value),
            f"[{color}]{converter.format(gain.gain)} ({gain.gain_percent:+.2f}%)[/{color}]",
        )
    console.print(table)
    console.print(
        f"Total value [bold]{converter.format_converted(totals.total_value)}[/bold], "
        f"gain {converter.format_converted(totals.total_gain)} ({totals.gain_percent:+.2f}%)"
    )


@app.command()
def currencies() -> None:
    """List supported display currencies."""
    from wealthdash.analyzers.currency import supported_currencies

    table = Table(title="Supported Currencies")
    table.add_column("Code", style="bold cyan")
    table.add_column("Symbol")
    table.add_column("Name")
    table.add_column("Per 1 USD", justify="right")

    for meta in supported_currencies():
        table.add_row(meta.code, meta.symbol, meta.label, f"{meta.rate:g}")

    console.print(table)


if __name__ == "__main__":
    app()
