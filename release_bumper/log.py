"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: int | str | None = None) -> None:
    """Route stdlib logging and structlog to stderr with a console renderer.

    Stdout is left for ``key=value`` output.
    """
    if isinstance(level, str):
        level_value = logging.getLevelName(level.strip().upper())
        if not isinstance(level_value, int):
            level_value = logging.INFO
    elif isinstance(level, int):
        level_value = level
    else:
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    # the token travels in request headers
    logging.getLogger("httpx").setLevel(max(level_value, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

