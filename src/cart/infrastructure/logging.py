"""Logging configuration.

Standard library logging carries the records; structlog shapes them.
Development gets a colourless console renderer, production and staging
get one JSON object per line.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


def get_environment() -> str:
    return os.getenv("CART_ENV", "development").lower()


def get_log_level() -> str:
    """Get log level based on environment."""
    return os.getenv("LOG_LEVEL", _LEVEL_BY_ENV.get(get_environment(), "INFO")).upper()


def setup_stdlib_logging() -> None:
    log_level = get_log_level()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]


def setup_structlog() -> None:
    """Configure structlog for structured logging."""
    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if get_environment() in ("production", "staging"):
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging() -> None:
    """Configure all logging for the application."""
    setup_stdlib_logging()
    setup_structlog()
