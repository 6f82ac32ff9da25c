"""Recommendation and neighbor lookup commands for CF-Lite CLI."""
import json
from pathlib import Path

import typer

from cf_lite.cli import app, build_config, load_events, logger
from cf_lite.cli.types import Axis
from cf_lite.engine import (
    CFMethod,
    apply_time_decay,
    build_item_user_matrix,
    build_user_item_matrix,
    find_nearest_neighbors,
    get_recommendations_cf,
)


@app.command()
def recommend(
    events: Path = typer.Argument(..., help="Interaction file (parquet, csv or duckdb)"),
    user_id: str = typer.Argument(..., help="User to recommend for"),
    method: CFMethod = typer.Option(CFMethod.USER_BASED, help="Neighborhood strategy"),
    k: int = typer.Option(20, help="Number of nearest neighbors"),
    min_overlap: int = typer.Option(2, help="Minimum co-rated dimensions for a neighbor"),
    decay_factor: float = typer.Option(0.95, help="Daily decay rate (1 disables decay)"),
    max_results: int = typer.Option(10, help="Number of recommendations to return"),
    table: str = typer.Option("events", help="Table to read from a DuckDB database"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Recommend unseen items for a user."""
    config = build_config(method, k, min_overlap, decay_factor)
    interactions = load_events(events, table)

    if max_results < 0:
        typer.echo("Error: max-results must be non-negative", err=True)
        raise typer.Exit(code=1)

    logger.info(f"Recommending for {user_id} with {config.method.value} CF")
    recommendations = get_recommendations_cf(user_id, interactions, config, max_results)

    if as_json:
        payload = {
            "user_id": user_id,
            "method": config.method.value,
            "recommendations": [rec.model_dump() for rec in recommendations],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    if not recommendations:
        typer.echo(f"No recommendations for user {user_id}")
        return

    for rank, rec in enumerate(recommendations, start=1):
        typer.echo(f"{rank:>3}. {rec.item_id}\t{rec.predicted_score:.4f}")


@app.command()
def neighbors(
    events: Path = typer.Argument(..., help="Interaction file (parquet, csv or duckdb)"),
    entity_id: str = typer.Argument(..., help="User or item ID"),
    axis: Axis = typer.Option(Axis.USER, help="Search among users or among items"),
    k: int = typer.Option(20, help="Number of nearest neighbors"),
    min_overlap: int = typer.Option(2, help="Minimum co-rated dimensions for a neighbor"),
    decay_factor: float = typer.Option(0.95, help="Daily decay rate (1 disables decay)"),
    table: str = typer.Option("events", help="Table to read from a DuckDB database"),
) -> None:
    """Show the nearest neighbors of a user or an item."""
    config = build_config(CFMethod.USER_BASED, k, min_overlap, decay_factor)
    interactions = apply_time_decay(load_events(events, table), config.decay_factor)

    if axis == Axis.USER:
        matrix = build_user_item_matrix(interactions)
    else:
        matrix = build_item_user_matrix(interactions)

    found = find_nearest_neighbors(entity_id, matrix, config.k, config.min_overlap)
    if not found:
        typer.echo(f"No neighbors for {axis.value} {entity_id}")
        return

    for rank, neighbor in enumerate(found, start=1):
        typer.echo(f"{rank:>3}. {neighbor.id}\t{neighbor.similarity:.4f}")
