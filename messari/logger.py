"""
Leveled logging used by the Messari client.

A logger is any callable taking ``(level, message, extra)``. The default
console logger forwards to the standard library :mod:`logging` module, so
applications can route SDK output with their usual handlers.

Example:
    >>> from messari.logger import LogLevel, create_filtered_logger, make_console_logger
    >>>
    >>> log = create_filtered_logger(make_console_logger("messari-client"), LogLevel.WARN)
    >>> log(LogLevel.DEBUG, "dropped")
    >>> log(LogLevel.ERROR, "request failed", {"status": 500})
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional


class LogLevel(str, Enum):
    """Severity of a log message."""

    NONE = "none"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


Logger = Callable[[LogLevel, str, Optional[dict[str, Any]]], None]

_SEVERITY: dict[LogLevel, int] = {
    LogLevel.NONE: 100,
    LogLevel.DEBUG: 20,
    LogLevel.INFO: 40,
    LogLevel.WARN: 60,
    LogLevel.ERROR: 80,
}

_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def log_level_severity(level: LogLevel) -> int:
    """Map a log level to a number ordered by severity."""
    try:
        return _SEVERITY[LogLevel(level)]
    except (KeyError, ValueError):
        raise ValueError(f"Unexpected log level: {level!r}") from None


def make_console_logger(name: str) -> Logger:
    """Create a logger that writes through ``logging.getLogger(name)``."""
    target = logging.getLogger(name)

    def _log(level: LogLevel, message: str, extra: dict[str, Any] | None = None) -> None:
        if level == LogLevel.NONE:
            return
        if extra:
            target.log(_STDLIB_LEVELS[LogLevel(level)], "%s %s", message, extra)
        else:
            target.log(_STDLIB_LEVELS[LogLevel(level)], "%s", message)

    return _log


def create_filtered_logger(logger: Logger, min_level: LogLevel) -> Logger:
    """Wrap ``logger`` so only messages at or above ``min_level`` reach it."""
    min_severity = log_level_severity(min_level)

    def _log(level: LogLevel, message: str, extra: dict[str, Any] | None = None) -> None:
        if log_level_severity(level) >= min_severity:
            logger(level, message, extra)

    return _log


def no_op_logger(level: LogLevel, message: str, extra: dict[str, Any] | None = None) -> None:
    """Logger that discards everything."""
