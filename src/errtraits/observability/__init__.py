"""Structured logging module: process-wide logger backing Result.log_err."""

from .logger import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    NoOpRenderer,
    StdlibRenderer,
    DEFAULT_LOGGER_NAME,
    configure_logging,
    default_logger_name,
    get_logger,
    is_configured,
    log_context,
    reset_logging,
    use_renderer,
)

__all__ = [
    "BoundLogger",
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "NoOpRenderer",
    "StdlibRenderer",
    "DEFAULT_LOGGER_NAME",
    "configure_logging",
    "default_logger_name",
    "get_logger",
    "is_configured",
    "log_context",
    "reset_logging",
    "use_renderer",
]
