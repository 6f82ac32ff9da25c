"""CLI entrypoint for CF-Lite: command registration and helpers."""
from pathlib import Path
from typing import List

import typer

from cf_lite.engine.types import CFConfig, CFMethod, Interaction, merge_config
from cf_lite.exceptions import CFError
from cf_lite.ingest import load_interactions
from cf_lite.utils.logging import configure_logging, get_logger

logger = get_logger("cli")

# Create the CLI app
app = typer.Typer(help="CF-Lite: memory-based collaborative filtering recommendations")


@app.callback()
def main(
    log_level: str = typer.Option("warning", help="Log level"),
    log_file: Path = typer.Option(None, help="Optional file to write logs to"),
) -> None:
    """CF-Lite command line interface."""
    configure_logging(log_level, log_file=str(log_file) if log_file else None)


def load_events(events: Path, table: str = "events") -> List[Interaction]:
    """Load interactions for a command, exiting with code 1 on bad input."""
    try:
        return load_interactions(events, table=table)
    except (FileNotFoundError, ValueError) as exc:
        # CFError is a ValueError, so malformed records land here too
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def build_config(method: CFMethod, k: int, min_overlap: int, decay_factor: float) -> CFConfig:
    """Validate CLI options into a CFConfig, exiting with code 1 on error."""
    try:
        return merge_config(
            {"method": method, "k": k, "min_overlap": min_overlap, "decay_factor": decay_factor}
        )
    except CFError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


# Import command modules (they register with the global `app`)
from cf_lite.cli.types import Axis, MetricType  # noqa: E402,F401
from cf_lite.cli.recommend import neighbors, recommend  # noqa: E402,F401
from cf_lite.cli.evaluate import evaluate, optimize  # noqa: E402,F401
from cf_lite.cli.serve import serve  # noqa: E402,F401

__all__ = [
    "app",
    "build_config",
    "load_events",
    "Axis",
    "MetricType",
    "recommend",
    "neighbors",
    "evaluate",
    "optimize",
    "serve",
]
