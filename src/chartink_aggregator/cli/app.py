"""Typer CLI wiring the screener aggregator."""

from __future__ import annotations

import asyncio
import json

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from chartink_aggregator.api import create_app
from chartink_aggregator.logging import configure_logging
from chartink_aggregator.screeners import (
    SCORED_SCREENS,
    SCREEN_DEFINITIONS,
    side_label,
)

from .deps import get_aggregator, get_settings

app = typer.Typer(help="Chartink screener aggregator")


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_settings()
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Listen:\t\t" + f"{settings.host}:{settings.port}")
    typer.echo("Chartink URL:\t" + settings.base_url)
    typer.echo("Timeout:\t" + f"{settings.timeout:g}s")
    typer.echo("Log level:\t" + settings.log_level)


@app.command("screens")
def list_screens() -> None:
    """List the screen catalogue in flattening order."""

    table = Table(title=f"Chartink screens ({len(SCREEN_DEFINITIONS)})")
    table.add_column("Name", no_wrap=True)
    table.add_column("Side", no_wrap=True)
    table.add_column("Momentum")
    table.add_column("Clause", overflow="fold")
    for name, definition in SCREEN_DEFINITIONS.items():
        scored = "yes" if name in SCORED_SCREENS else ""
        table.add_row(name, side_label(name), scored, definition.clause)
    Console().print(table)


@app.command("fetch")
def fetch(
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON output"),
) -> None:
    """Run one aggregation and print the flattened rows as JSON."""

    configure_logging(get_settings().log_level)
    aggregator = get_aggregator()
    try:
        rows = asyncio.run(aggregator.fetch_aggregated_screens())
    except Exception as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(json.dumps(rows, indent=2 if pretty else None))


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to HOST)"),
    port: int | None = typer.Option(None, min=1, max=65535, help="Port (defaults to PORT)"),
) -> None:
    """Serve the aggregated feed over HTTP."""

    settings = get_settings()
    configure_logging(settings.log_level)
    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"Server running on http://{bind_host}:{bind_port}")
    uvicorn.run(
        create_app(settings=settings),
        host=bind_host,
        port=bind_port,
        log_level=settings.log_level.lower(),
    )


__all__ = ["app"]
