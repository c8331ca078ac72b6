"""Mini README: Entry point CLI for the Spendboard dashboard.

This script exposes a Typer CLI with two commands: ``serve`` starts the
FastAPI dashboard API with configurable host, port, and production flags,
and ``summary`` loads transactions once and prints the financial overview
in the terminal. Settings come from ``SPENDBOARD_*`` environment variables
when options are omitted.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from spendboard.configuration import get_settings
from spendboard.loading import LoadPhase, LifecycleSnapshot, TransactionLifecycle
from spendboard.logging_utils import configure_root_logger
from spendboard.sources import REGISTRY, source_from_settings

cli = typer.Typer(help="Serve and inspect the Spendboard transaction dashboard.")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 is a bind address, not something a browser can open.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Spendboard on {effective_host}:{effective_port} "
        f"(source: {settings.transaction_source}).\n"
        f"Transactions are served at http://{browser_host}:{effective_port}/transactions"
    )
    uvicorn.run(
        "spendboard.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


def _format_amount(amount: float) -> str:
    return f"${abs(amount):,.2f}"


def render_summary(snapshot: LifecycleSnapshot) -> str:
    """Render the overview the way the dashboard screen lays it out."""

    lines = ["Financial Overview"]
    totals = snapshot.totals
    if totals is not None:
        lines.append(f"  Income:   {_format_amount(totals.income)}")
        lines.append(f"  Expenses: {_format_amount(totals.expenses)}")
        sign = "-" if totals.balance < 0 else ""
        lines.append(f"  Balance:  {sign}{_format_amount(totals.balance)}")
    lines.append("")
    lines.append("Recent Transactions")
    if not snapshot.records:
        lines.append("  No transactions found")
    for record in snapshot.records:
        sign = "+" if record.is_income else "-"
        lines.append(
            f"  {record.occurred_on}  {record.category:<16} {sign}{_format_amount(record.amount)}"
        )
    return "\n".join(lines)


@cli.command()
def summary(
    source: str = typer.Option(None, help="Transaction source identifier (e.g. sample, json_file)."),
    file: Optional[Path] = typer.Option(None, help="JSON file for the json_file source."),
    delay: Optional[float] = typer.Option(None, help="Simulated delay for the sample source."),
) -> None:
    """Load transactions once and print totals and the transaction list."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    overrides = {}
    if source:
        overrides["transaction_source"] = source.strip().lower()
    if file is not None:
        overrides["transactions_file"] = file.expanduser()
        overrides.setdefault("transaction_source", "json_file")
    if delay is not None:
        overrides["sample_delay_seconds"] = delay
    effective = settings.model_copy(update=overrides)

    try:
        transaction_source = source_from_settings(effective)
    except (KeyError, ValueError) as error:
        available = ", ".join(REGISTRY.available_sources())
        typer.echo(f"{error} (available sources: {available})", err=True)
        raise typer.Exit(code=2) from error

    lifecycle = TransactionLifecycle(transaction_source)
    typer.echo("Loading Transactions...")
    snapshot = asyncio.run(lifecycle.activate())
    if snapshot.phase is LoadPhase.FAILED:
        typer.echo(f"Unable to load transactions: {snapshot.error}", err=True)
        raise typer.Exit(code=1)
    typer.echo(render_summary(snapshot))


if __name__ == "__main__":
    cli()
