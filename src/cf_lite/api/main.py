"""FastAPI service for CF-Lite."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Callable, Optional, Union, cast

from fastapi import FastAPI, Request, Response

from cf_lite import __version__
from cf_lite.api.errors import add_error_handlers
from cf_lite.api.routers import health, recommendations
from cf_lite.api.state import APIState
from cf_lite.ingest import load_interactions
from cf_lite.utils.logging import get_logger, log_exception

logger = get_logger("api")


def create_app(events_path: Optional[Union[str, Path]] = None, table: str = "events") -> FastAPI:
    """Create FastAPI application.

    Args:
        events_path: Interaction file served by GET /recommend; without one
            only POST /recommend can produce recommendations
        table: Table to read when *events_path* is a DuckDB database

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Load interactions on startup."""
        if events_path is not None:
            logger.info(f"Loading interactions from {events_path}")
            try:
                app.state.api.set_interactions(load_interactions(events_path, table=table))
                logger.info(
                    f"API initialized with {app.state.api.user_count} users "
                    f"and {app.state.api.item_count} items"
                )
            except (FileNotFoundError, ValueError) as exc:
                # The API still starts so health checks and POST /recommend work
                log_exception(logger, "Error loading interactions", exc)
        yield

    app = FastAPI(
        title="CF-Lite API",
        description="Memory-based collaborative filtering recommendations",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.api = APIState()

    add_error_handlers(app)

    @app.middleware("http")
    async def count_requests(request: Request, call_next: Callable[[Request], Any]) -> Response:
        """Count requests middleware."""
        request.app.state.api.increase_request_count()
        response = await call_next(request)
        return cast(Response, response)

    app.include_router(health.router, tags=["health"])
    app.include_router(recommendations.router, tags=["recommendations"])

    return app
