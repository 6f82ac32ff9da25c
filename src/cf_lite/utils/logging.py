"""Centralized logging configuration for CF-Lite."""

import logging
import sys
from enum import Enum
from typing import Any, Dict, Optional, Union


class LogLevel(str, Enum):
    """Log level enum for CF-Lite."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


LOG_LEVEL_MAP = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.INFO,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """Configure logging for CF-Lite.

    Args:
        level: Log level (default: INFO)
        log_file: Optional file path to write logs to
        log_format: Optional custom log format
    """
    # Unknown level names fall back to INFO
    if isinstance(level, str) and not isinstance(level, LogLevel):
        try:
            level = LogLevel(level.upper())
        except ValueError:
            level = LogLevel.INFO

    numeric_level = LOG_LEVEL_MAP.get(level, logging.INFO)

    if log_format is None:
        log_format = DEFAULT_LOG_FORMAT

    # stdout is reserved for command output (JSON, ranked lists)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter(log_format)
    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance
    """
    if not name.startswith("cf-lite"):
        if name != "__main__":
            name = f"cf-lite.{name}"
        else:
            name = "cf-lite"

    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: Optional[Exception] = None,
    level: LogLevel = LogLevel.ERROR,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Log an exception with consistent formatting.

    Args:
        logger: Logger instance
        message: Error message
        exc: Exception object (if available)
        level: Log level (default: ERROR)
        extra: Additional context to include in the log
    """
    numeric_level = LOG_LEVEL_MAP[level]
    if exc is None:
        logger.log(numeric_level, message, extra=extra)
        return

    # Tracebacks only at ERROR and above
    exc_info = exc if numeric_level >= logging.ERROR else None
    logger.log(numeric_level, f"{message}: {exc}", exc_info=exc_info, extra=extra)
