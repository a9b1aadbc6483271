"""
Configures structured logging for hrefscan using structlog.

Standard output carries only link lines, so every log record goes to stderr.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, List, TextIO

import structlog


def configure_logging(log_level: str = "WARNING", stream: TextIO | None = None) -> None:
    """
    Sets up structlog to handle all logging for the application.
    """
    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.dev.ConsoleRenderer(colors=False),
            ],
        )
    )

    # Route the standard logging library through the same handler
    logging.basicConfig(level=log_level.upper(), handlers=[handler], force=True)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("hrefscan.logging")
    logger.debug("Logging configured", level=log_level.upper())


def install_library_defaults() -> None:
    """
    Routes structlog through the standard logging library unless it is already configured.

    Used when hrefscan is imported as a library, so debug events respect the
    host application's logging levels instead of printing to stdout.
    """
    logging.getLogger("hrefscan").addHandler(logging.NullHandler())
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
