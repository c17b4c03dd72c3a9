"""
Logging setup - Personality Diagnosis Engine
diagnosis_engine/core/logging.py

structlog on top of the stdlib logging module. LOG_FORMAT selects the
renderer: "json" for log shipping, "console" for local development.
"""

import logging
import sys

import structlog

from diagnosis_engine.config import Settings


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the root logger from settings."""
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
