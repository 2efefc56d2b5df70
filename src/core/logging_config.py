"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
Log level filtering is delegated to the standard logging module.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def configure_log_level(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Set the process-wide log level used by structlog filtering.

    Args:
        level: Level name such as INFO or DEBUG.
    """
    logging.basicConfig(format="%(message)s")
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
