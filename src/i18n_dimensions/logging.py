"""Logging utilities for the dimension registry.

This module provides standardized logging functionality for registry operations.
The library never installs handlers; applications configure the
``i18n_dimensions`` logger the usual way.
"""

import logging
from enum import Enum
from typing import Any

ROOT_LOGGER_NAME = "i18n_dimensions"


class LogLevel(int, Enum):
    """Log levels for the registry."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogEvent(str, Enum):
    """Event types for registry logging."""

    DIMENSION_REGISTRY = "dimension_registry"
    DIMENSION_VALIDATION = "dimension_validation"
    AVAILABLE_CACHE = "available_cache"
    SETTINGS = "settings"
    BACKEND = "backend"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root logger.

    Args:
        name: Either a dotted module name inside the package or a short suffix

    Returns:
        The configured logger
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


_logger = get_logger("events")


def _log(level: LogLevel, event: LogEvent, message: str, **data: Any) -> None:
    """Log an event with structured data attached.

    Args:
        level: Severity level
        event: Event type
        message: Human readable message
        **data: Event data, exposed on the record as ``event_data``
    """
    if not _logger.isEnabledFor(level):
        return
    _logger.log(level, message, extra={"event": event.value, "event_data": data})


def log_debug(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.DEBUG, event, message, **data)


def log_info(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.INFO, event, message, **data)


def log_warning(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.WARNING, event, message, **data)


def log_error(event: LogEvent, message: str, **data: Any) -> None:
    _log(LogLevel.ERROR, event, message, **data)
