"""Mini README: Entry point CLI for Transaction Insights.

Two commands are exposed through Typer: ``report`` prints every aggregate for
a transaction export as JSON, and ``serve`` launches the FastAPI interface
with uvicorn. Both fall back to environment-driven settings for paths, host
and port.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from transaction_insights.analytics import TransactionDataFetcher
from transaction_insights.configuration import get_settings
from transaction_insights.errors import TransactionDataError
from transaction_insights.logging_utils import configure_root_logger
from transaction_insights.records import load_transactions

cli = typer.Typer(help="Query and serve analytics over a transaction export.")


@cli.command()
def report(
    data_file: Optional[Path] = typer.Option(None, help="JSON export to analyse."),
    client: Optional[str] = typer.Option(
        None, help="Also report totals and open issues for this client."
    ),
) -> None:
    """Print all aggregates for the export as indented JSON."""

    settings = get_settings()
    configure_root_logger(settings.numeric_log_level)
    source = data_file or settings.data_file
    try:
        transactions = load_transactions(source)
    except TransactionDataError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    fetcher = TransactionDataFetcher(transactions)
    typer.echo(json.dumps(fetcher.summarise(client_name=client), indent=2))


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the JSON API using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.numeric_log_level)

    typer.echo(
        f"Serving {settings.data_file} on http://{effective_host}:{effective_port}"
    )
    uvicorn.run(
        "transaction_insights.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
