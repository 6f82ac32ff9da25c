"""Serving command for CF-Lite CLI."""
from pathlib import Path

import typer

from cf_lite.cli import app


@app.command()
def serve(
    events: Path = typer.Argument(None, help="Interaction file served by GET /recommend"),
    host: str = typer.Option("0.0.0.0", help="Host to listen on"),
    port: int = typer.Option(8000, help="Port to listen on"),
    log_level: str = typer.Option("info", help="Uvicorn log level"),
    table: str = typer.Option("events", help="Table to read from a DuckDB database"),
) -> None:
    """Start the recommendation API server."""
    import uvicorn

    from cf_lite.api.main import create_app

    if events is not None and not events.exists():
        typer.echo(f"Interaction file {events} does not exist", err=True)
        raise typer.Exit(code=1)

    app_instance = create_app(events_path=events, table=table)
    typer.echo(f"Starting API server at http://{host}:{port}")
    uvicorn.run(app_instance, host=host, port=port, log_level=log_level)
