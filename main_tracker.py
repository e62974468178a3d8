"""Mini README: Entry point CLI for the financial tracker.

This script exposes a Typer CLI that starts the FastAPI page with configurable
host, port, and production flags, writes ledger exports, and lists the
configured categories. Settings are drawn from ``FINTRACKER_*`` environment
variables when available.
"""

from __future__ import annotations

from pathlib import Path

import typer
import uvicorn

from fintracker.configuration import get_settings
from fintracker.export import LedgerExporter
from fintracker.finance import LedgerStore
from fintracker.logging_utils import configure_root_logger

cli = typer.Typer(help="Launch and manage the financial tracker.")


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
        "Starting the financial tracker on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "fintracker.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def export(
    output: Path = typer.Option(
        None, help="Destination file. Defaults to the configured export file name."
    ),
) -> None:
    """Write the starting ledger to a JSON file."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    store = LedgerStore(
        None if settings.seed_demo_transactions else [],
        categories=settings.categories,
    )
    exporter = LedgerExporter(filename=settings.export_filename)
    destination = exporter.write(store.snapshot(), output or Path(exporter.filename))
    typer.echo(f"Exported {len(store)} transactions to {destination}")


@cli.command()
def categories() -> None:
    """Print the configured category labels."""

    for label in get_settings().categories:
        typer.echo(label)


if __name__ == "__main__":
    cli()
