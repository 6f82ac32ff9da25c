"""API routers for CF-Lite."""

from cf_lite.api.routers import health, recommendations

__all__ = ["health", "recommendations"]
