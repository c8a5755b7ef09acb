"""Structured logging setup using structlog."""

import logging
import sys

import structlog
from structlog.typing import Processor

from green_ach.core.config import get_settings


def setup_logging(level: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog for the gateway.

    Args:
        level: Log level name, defaults to the GREEN_LOG_LEVEL setting
        log_format: "json" for log aggregation, "console" for humans
    """
    if level is None or log_format is None:
        settings = get_settings()
        level = level or settings.log_level
        log_format = log_format or settings.log_format
    level = level.upper()
    log_format = log_format.lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level, logging.INFO),
    )

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.INFO)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
