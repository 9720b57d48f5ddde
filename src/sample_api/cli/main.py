"""CLI for sample-api: serve / settings commands."""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from sample_api import __version__
from sample_api.core.config import AppSettings

app = typer.Typer(name="sample-api", help="Demo API with a Redis-backed counter")
console = Console()


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: HOST or 0.0.0.0)"),
    port: Optional[int] = typer.Option(None, help="Listen port (default: PORT or 3000)"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = AppSettings()
    bind_host = host or settings.server.host
    bind_port = port or settings.server.port

    console.rule(f"[bold]Sample API {__version__}")
    console.print(f"  Port:    {bind_port}")
    console.print(f"  Health:  http://localhost:{bind_port}/health")
    console.print(f"  Redis:   {settings.cache.host}:{settings.cache.port}"
                  f"{'' if settings.cache.enabled else ' (disabled)'}")
    console.rule()

    uvicorn.run(
        "sample_api.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
        access_log=False,
    )


@app.command()
def settings() -> None:
    """Show the effective configuration."""
    current = AppSettings()
    table = Table(title="Effective settings")
    table.add_column("Group", style="cyan")
    table.add_column("Key")
    table.add_column("Value", style="green")

    for group_name, group in current:
        for key, value in group.model_dump().items():
            table.add_row(group_name, key, str(value))

    console.print(table)


if __name__ == "__main__":
    app()
