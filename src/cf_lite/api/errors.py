"""Error handling for CF-Lite API."""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cf_lite.exceptions import CFError
from cf_lite.utils.logging import LogLevel, get_logger, log_exception

logger = get_logger("api")


class APIError(Exception):
    """Base exception for CF-Lite API errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(self, detail: Optional[str] = None):
        """Initialize exception.

        Args:
            detail: Error detail message
        """
        if detail:
            self.detail = detail
        super().__init__(self.detail)


class ServiceUnavailableError(APIError):
    """Error raised when a service is unavailable."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    detail = "Service unavailable"


class InteractionsNotLoadedError(ServiceUnavailableError):
    """Error raised when no interactions were loaded at startup."""

    detail = "No interactions loaded; start the server with an interaction file or POST them to /recommend"


def _count_error(request: Request) -> None:
    state = getattr(request.app.state, "api", None)
    if state is not None:
        state.increase_error_count()


def add_error_handlers(app: FastAPI) -> None:
    """Add error handlers to FastAPI app.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        _count_error(request)
        log_exception(
            logger,
            "Validation error",
            exc,
            level=LogLevel.WARNING,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.exception_handler(CFError)
    async def cf_exception_handler(request: Request, exc: CFError) -> JSONResponse:
        """Handle malformed engine input (bad config or interactions)."""
        _count_error(request)
        log_exception(
            logger,
            "Invalid recommendation input",
            exc,
            level=LogLevel.WARNING,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.detail},
        )

    @app.exception_handler(APIError)
    async def api_exception_handler(request: Request, exc: APIError) -> JSONResponse:
        """Handle CF-Lite API errors."""
        _count_error(request)
        level = LogLevel.ERROR
        if exc.status_code < 500:
            level = LogLevel.WARNING

        log_exception(
            logger,
            "API error",
            exc,
            level=level,
            extra={"path": request.url.path, "method": request.method, "status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        _count_error(request)
        log_exception(
            logger,
            "Unhandled exception",
            exc,
            level=LogLevel.ERROR,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "An unexpected error occurred"},
        )
