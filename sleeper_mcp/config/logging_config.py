"""Structured logging configuration using structlog.

The stdio transport owns stdout, so all log output goes to stderr.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

from .settings import settings


def setup_logging(
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name, defaults to ``settings.log_level``
        log_format: ``"console"`` or ``"json"``, defaults to ``settings.log_format``
        stream: Output stream, defaults to stderr

    Calling again replaces the previous configuration.
    """
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    log_format = log_format or settings.log_format
    stream = stream or sys.stderr

    # Library loggers (mcp, httpx) stay on stdlib logging
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
        level=log_level,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(logging.WARNING, log_level))

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if log_format == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a structlog logger bound to ``name``."""
    return structlog._config.BoundLoggerLazyProxy(None, initial_values={"logger": name})
