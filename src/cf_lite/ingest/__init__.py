"""Interaction loading for CF-Lite."""

from cf_lite.ingest.loader import REQUIRED_COLUMNS, interactions_from_frame, load_interactions

__all__ = ["REQUIRED_COLUMNS", "interactions_from_frame", "load_interactions"]
