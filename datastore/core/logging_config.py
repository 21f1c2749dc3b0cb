"""Structured logging setup (structlog on top of the standard library)."""
from __future__ import annotations

import logging
import sys

import structlog

from datastore.core.config import get_settings


def configure_logging() -> None:
    """
    Configure structlog to emit JSON logs (LOG_FORMAT=json) or colored
    console logs (default).
    """
    settings = get_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # uvicorn/fastapi keep using stdlib logging
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
