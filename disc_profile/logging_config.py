"""
DiSC Profile — Structured logging configuration

Configures structlog with the same processor chain across the library and
the CLI.  Call ``configure_logging()`` once at start-up; modules simply do::

    logger = structlog.get_logger("disc_profile.<module>")
"""

from __future__ import annotations

import sys

import structlog

from disc_profile.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from ``settings`` (defaults to ``get_settings()``).

    Log output goes to stderr so that CLI results on stdout stay parseable.
    """
    settings = settings or get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            settings.log_level_number
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
