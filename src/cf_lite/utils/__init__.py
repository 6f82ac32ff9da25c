"""Utility helpers for CF-Lite."""

from cf_lite.utils.logging import LogLevel, configure_logging, get_logger, log_exception

__all__ = ["LogLevel", "configure_logging", "get_logger", "log_exception"]
