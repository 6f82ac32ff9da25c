"""Interaction loading for CF-Lite.

Interactions are read with DuckDB from a Parquet file, a CSV file or an
``events`` table inside a DuckDB database. The loader never writes: history
is owned by whoever produced the file.
"""

import re
from pathlib import Path
from typing import List, Union

import duckdb
import pandas as pd

from cf_lite.engine.types import Interaction, coerce_interactions
from cf_lite.exceptions import InvalidInteractionError
from cf_lite.utils.logging import get_logger

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("user_id", "item_id", "score", "timestamp")
DATABASE_SUFFIXES = {".db", ".duckdb"}

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_EPOCH = pd.Timestamp("1970-01-01", tz="UTC")


def _build_query(path: Path, table: str) -> str:
    suffix = path.suffix.lower()
    if suffix in DATABASE_SUFFIXES:
        if not _IDENTIFIER.match(table):
            raise ValueError(f"Invalid table name: {table}")
        return f"SELECT * FROM {table}"

    quoted = str(path).replace("'", "''")
    if suffix == ".parquet":
        return f"SELECT * FROM read_parquet('{quoted}')"
    if suffix == ".csv":
        return f"SELECT * FROM read_csv_auto('{quoted}')"
    raise ValueError(f"Unsupported interaction file type: {path.suffix or path.name}")


def load_interactions(path: Union[str, Path], table: str = "events") -> List[Interaction]:
    """Load interaction records from disk.

    Args:
        path: Parquet file, CSV file or DuckDB database
        table: Table to read when *path* is a DuckDB database

    Returns:
        Validated interactions

    Raises:
        FileNotFoundError: If *path* does not exist
        ValueError: If the file type or table name is not supported
        InvalidInteractionError: If DuckDB cannot read the file or table, or a
            record is invalid
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise FileNotFoundError(f"Interaction file '{path}' does not exist")

    query = _build_query(path, table)
    if path.suffix.lower() in DATABASE_SUFFIXES:
        conn = duckdb.connect(str(path), read_only=True)
    else:
        conn = duckdb.connect()

    try:
        df = conn.execute(query).fetchdf()
    except duckdb.Error as exc:
        raise InvalidInteractionError(f"cannot read {path}: {exc}") from exc
    finally:
        conn.close()

    interactions = interactions_from_frame(df)
    logger.info(f"Loaded {len(interactions)} interactions from {path}")
    return interactions


def interactions_from_frame(df: pd.DataFrame) -> List[Interaction]:
    """Convert a DataFrame with interaction columns into Interaction values.

    ``timestamp`` may hold epoch milliseconds or datetimes; naive datetimes
    are read as UTC. Extra columns are ignored.

    Args:
        df: DataFrame with user_id, item_id, score and timestamp columns

    Returns:
        Validated interactions in row order

    Raises:
        InvalidInteractionError: If columns are missing, hold nulls or
            timestamps are fractional
    """
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise InvalidInteractionError(f"missing columns: {', '.join(missing)}")

    if df.empty:
        return []

    null_columns = [column for column in REQUIRED_COLUMNS if df[column].isnull().any()]
    if null_columns:
        raise InvalidInteractionError(f"null values in columns: {', '.join(null_columns)}")

    timestamps = df["timestamp"]
    if pd.api.types.is_datetime64_any_dtype(timestamps):
        timestamps = (pd.to_datetime(timestamps, utc=True) - _EPOCH) // pd.Timedelta(milliseconds=1)
    elif not pd.api.types.is_numeric_dtype(timestamps) or pd.api.types.is_bool_dtype(timestamps):
        raise InvalidInteractionError("timestamp must be integer milliseconds or datetimes")
    elif pd.api.types.is_float_dtype(timestamps) and not (timestamps % 1 == 0).all():
        raise InvalidInteractionError("timestamp must be integer milliseconds")

    records = [
        {"user_id": user_id, "item_id": item_id, "score": score, "timestamp": timestamp}
        for user_id, item_id, score, timestamp in zip(
            df["user_id"].astype(str).tolist(),
            df["item_id"].astype(str).tolist(),
            df["score"].astype(float).tolist(),
            timestamps.astype("int64").tolist(),
        )
    ]
    return coerce_interactions(records)
