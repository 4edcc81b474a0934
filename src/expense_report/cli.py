"""CLI for Expense Report using Typer."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import Settings, load_settings
from .exceptions import ConfigurationError
from .money import format_minor
from .report import ExpenseReport, load_report

app = typer.Typer(
    name="expense-report",
    help="Settle shared multi-currency expenses within a group",
)

console = Console()


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _resolve_path(path: Path | None, settings: Settings) -> Path:
    """Use the explicit path, falling back to the configured default."""
    resolved = path or settings.default_report_path
    if resolved is None:
        raise ConfigurationError(
            "No report file given. Pass a path or set "
            "EXPENSE_REPORT_DEFAULT_REPORT_PATH."
        )
    return resolved


def format_money(amount_minor: int, currency: str, use_color: bool = True) -> str:
    """
    Format minor units with the currency code.

    Negative amounts are red, positive amounts green.
    """
    text = f"{format_minor(amount_minor)} {currency}"
    if not use_color or amount_minor == 0:
        return text
    color = "red" if amount_minor < 0 else "green"
    return f"[{color}]{text}[/{color}]"


def display_history(report: ExpenseReport):
    """Print every recorded event in order."""
    console.print("\n[bold]History:[/bold]")
    for entry in report.history():
        console.print(entry, markup=False, highlight=False, soft_wrap=True)


def display_plan(report: ExpenseReport, residual_warning_minor: int = 0):
    """Display the settlement plan in a table, followed by residuals."""
    plan = report.settle()
    registry = report.registry
    currency = report.base_currency()

    console.print()
    if not plan.entries:
        console.print("[green]Everyone is settled, no payments needed.[/green]")
    else:
        table = Table(
            title="Settlement", show_header=True, header_style="bold magenta"
        )
        table.add_column("Payer", style="cyan")
        table.add_column("Payee", style="cyan")
        table.add_column("Amount", justify="right")
        table.add_column("Pass", style="dim")

        for entry in plan.entries:
            table.add_row(
                registry.name(entry.payer_id),
                registry.name(entry.payee_id),
                format_money(entry.amount_minor, currency, use_color=False),
                "care of" if entry.kind == "care_of" else "pairwise",
            )

        console.print(table)

    if plan.residuals:
        console.print("\n[bold]Residuals:[/bold]")
        for residual in plan.residuals:
            line = (
                f"  {registry.name(residual.participant_id)}: "
                f"{format_money(residual.amount_minor, currency)}"
            )
            if abs(residual.amount_minor) > residual_warning_minor:
                line = f"⚠️ {line.strip()}"
            console.print(line)


@app.command()
def report(
    path: Path | None = typer.Argument(None, help="JSON report file"),
    history: bool = typer.Option(
        True, "--history/--no-history", help="Show event history before the plan"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Print the event history and the settlement plan.

    The plan lists who pays whom, in the base currency, followed by any
    rounding residuals.
    """
    setup_logging(verbose)

    try:
        settings = load_settings()
        expense_report = load_report(_resolve_path(path, settings))

        if history and settings.show_history:
            display_history(expense_report)

        display_plan(expense_report, settings.residual_warning_minor)

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


@app.command()
def balances(
    path: Path | None = typer.Argument(None, help="JSON report file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Print each participant's net balance before settlement."""
    setup_logging(verbose)

    try:
        settings = load_settings()
        expense_report = load_report(_resolve_path(path, settings))
        currency = expense_report.base_currency()

        table = Table(title="Balances", show_header=True, header_style="bold magenta")
        table.add_column("Participant", style="cyan")
        table.add_column("Balance", justify="right")

        for name, amount in zip(
            expense_report.participant_names(), expense_report.balances()
        ):
            table.add_row(name, format_money(amount, currency))

        console.print(table)
        console.print("[dim]Positive balances owe the group, negative are owed.[/dim]")

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {escape(str(e))}")
        if verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    app()
