"""HTTP API for CF-Lite."""

from cf_lite.api.main import create_app

__all__ = ["create_app"]
