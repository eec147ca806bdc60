"""
Structured logging configuration using structlog.

The host owns process-wide logging; this module only configures structlog
for standalone runs (CLI, tests) and hands out bound loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import Processor

    from core.config import Settings


def _renderer_chain(json_format: bool) -> list[Processor]:
    if json_format:
        # Item names and descriptions are often not ASCII
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )
    ]


def configure_logging(*, json_format: bool = False, log_level: str = "INFO") -> None:
    """
    Configure structlog to write to stderr, keeping stdout for command output.

    Args:
        json_format: Render JSON lines instead of the console format.
        log_level: Minimum level name, case-insensitive.
    """
    level = logging.getLevelName(log_level.upper())
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.set_exc_info,
            *_renderer_chain(json_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    # httpx logs through the stdlib
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)


def configure_from_settings(settings: Settings) -> None:
    """Configure logging from the debug and log_json settings."""
    configure_logging(json_format=settings.log_json, log_level=settings.log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, typically named after a plugin namespace."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
