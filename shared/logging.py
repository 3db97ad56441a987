"""
Centralized logging configuration for the HumanCode gateway.

This module sets up structured logging with:
- Settings-driven configuration (dev vs production)
- JSON formatting for production, pretty console for development
- Redaction of credentials (app key, signatures) before rendering

Usage:
    >>> from shared.logging import get_logger
    >>> log = get_logger(__name__)
    >>> log.info("session_id_obtained", session_id="abc123")
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.types import EventDict, Processor

from config import LoggingSettings

# Sensitive fields to redact from logs
REDACTED_FIELDS = {
    "app_key",
    "secret",
    "key",
    "sign",
    "signature",
    "token",
    "authorization",
}

_RESERVED_KEYS = {"level", "event", "timestamp", "logger"}


def get_logger(name: str) -> BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog BoundLogger instance
    """
    return structlog.get_logger(name)


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO format timestamp to event dict."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def redact_sensitive_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Redact sensitive fields from logs."""
    for key in list(event_dict.keys()):
        if key in _RESERVED_KEYS:
            continue
        lowered = key.lower()
        if lowered in REDACTED_FIELDS or any(
            sensitive in lowered for sensitive in ("secret", "app_key", "token")
        ):
            event_dict[key] = "***REDACTED***"
    return event_dict


def filter_exceptions(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Format exceptions properly for logging."""
    exc_info = event_dict.pop("exc_info", None)
    if exc_info:
        event_dict["exception"] = structlog.processors.format_exc_info(
            logger, method_name, {"exc_info": exc_info}
        )["exception"]
    return event_dict


def configure_structlog(log_format: str = "console") -> None:
    """
    Configure structlog with appropriate processors for the environment.

    Production: JSON formatting for easy parsing
    Development: Pretty console formatting with colors
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_timestamp,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        redact_sensitive_fields,
        filter_exceptions,
    ]

    if log_format == "json":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            pad_event_to=15,
            sort_keys=False,
        )

    structlog.configure(
        processors=shared_processors
        + [structlog.processors.format_exc_info, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_stdlib_logging(log_level: str = "INFO") -> None:
    """
    Configure standard library logging to work with structlog.

    Sets up:
    - Log level from settings
    - Console handler for stdout
    - Format compatible with structlog
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper(), logging.INFO),
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def setup_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Initialize logging system for the application.

    Called once from create_app() before anything else logs.
    """
    if settings is None:
        settings = LoggingSettings()

    configure_stdlib_logging(settings.log_level)
    configure_structlog(settings.log_format)

    get_logger(__name__).info(
        "logging_initialized",
        log_level=settings.log_level,
        log_format=settings.log_format,
    )


__all__ = [
    "REDACTED_FIELDS",
    "configure_stdlib_logging",
    "configure_structlog",
    "get_logger",
    "redact_sensitive_fields",
    "setup_logging",
]
