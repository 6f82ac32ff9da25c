"""Offline evaluation commands for CF-Lite CLI."""
import json
from pathlib import Path
from typing import Optional

import typer

from cf_lite.cli import app, build_config, load_events, logger
from cf_lite.cli.types import MetricType
from cf_lite.engine import CFMethod
from cf_lite.evaluation import ConfigOptimizer, evaluate_config


@app.command()
def evaluate(
    events: Path = typer.Argument(..., help="Interaction file (parquet, csv or duckdb)"),
    method: CFMethod = typer.Option(CFMethod.USER_BASED, help="Neighborhood strategy"),
    k: int = typer.Option(20, help="Number of nearest neighbors"),
    min_overlap: int = typer.Option(2, help="Minimum co-rated dimensions for a neighbor"),
    decay_factor: float = typer.Option(0.95, help="Daily decay rate (1 disables decay)"),
    cutoff: int = typer.Option(10, help="Recommendation list length for HR/NDCG"),
    min_interactions: int = typer.Option(2, help="Minimum distinct items for a test user"),
    table: str = typer.Option("events", help="Table to read from a DuckDB database"),
) -> None:
    """Leave-last-out evaluation of one configuration."""
    config = build_config(method, k, min_overlap, decay_factor)
    interactions = load_events(events, table)

    if cutoff < 1:
        typer.echo("Error: cutoff must be positive", err=True)
        raise typer.Exit(code=1)

    results = evaluate_config(interactions, config, k=cutoff, min_interactions=min_interactions)
    typer.echo(json.dumps({"config": config.model_dump(mode="json"), "results": results}, indent=2))


@app.command()
def optimize(
    events: Path = typer.Argument(..., help="Interaction file (parquet, csv or duckdb)"),
    metric: MetricType = typer.Option(MetricType.NDCG_10, help="Metric to maximize"),
    n_trials: int = typer.Option(20, help="Number of trials"),
    timeout: Optional[int] = typer.Option(None, help="Timeout in seconds"),
    seed: int = typer.Option(42, help="Random seed"),
    output: Optional[Path] = typer.Option(None, help="Write best parameters to this JSON file"),
    table: str = typer.Option("events", help="Table to read from a DuckDB database"),
) -> None:
    """Search for the best CFConfig with Optuna."""
    interactions = load_events(events, table)

    optimizer = ConfigOptimizer(metric=metric.value, n_trials=n_trials, timeout=timeout, seed=seed)
    optimizer.optimize(interactions)

    payload = {
        "metric": metric.value,
        "best_value": optimizer.best_value,
        "best_params": optimizer.best_config().model_dump(mode="json"),
    }
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(payload["best_params"], indent=2))
        logger.info(f"Saved best parameters to {output}")

    typer.echo(json.dumps(payload, indent=2))
