"""Mini README: Entry point CLI for the Pennywise finance tracker.

This script exposes a Typer CLI that starts the FastAPI interface with
configurable host, port and production flags, and prints ledger totals
straight from the configured storage without starting a server.
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn

from pennywise.configuration import get_settings
from pennywise.logging_utils import configure_root_logger
from pennywise.state import AppState

cli = typer.Typer(help="Run and inspect the Pennywise finance tracker.")


@cli.command()
def run(
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

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Pennywise on {effective_host}:{effective_port}.\n"
        f"Open your browser at http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "pennywise.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def summary(
    month: Optional[str] = typer.Option(
        None, help="Restrict totals to a YYYY-MM month (defaults to the saved filter)."
    ),
) -> None:
    """Print income, expense and balance totals."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    state = AppState.from_settings(settings)
    try:
        projection = state.projection(month)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--month") from error

    symbol = settings.currency_symbol
    totals = projection.summary
    storage = state.storage.metadata()
    typer.echo(f"Storage:  {storage['backend']} ({storage['location']})")
    typer.echo(f"Month:    {projection.month or 'all'}")
    typer.echo(f"Income:   {symbol}{totals.income:.2f}")
    typer.echo(f"Expenses: {symbol}{abs(totals.expenses):.2f}")
    typer.echo(f"Balance:  {symbol}{totals.balance:.2f}")
    for label, total in zip(projection.categories.labels, projection.categories.totals):
        typer.echo(f"  {label:<14}{symbol}{total:.2f}")


if __name__ == "__main__":
    cli()
