"""Structured logging setup."""

import logging
import sys
from typing import TextIO

import structlog


def setup_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Configure structlog to render events on ``stream`` (stderr by default).

    Capability probing logs at debug level, so run with ``DEBUG`` to see
    why a stream was left uncolored.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
    )
