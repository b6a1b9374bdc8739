"""
Structured logging configuration.
Record contents (notes, free text) are never logged, only identifiers and counts.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor

from coach_analytics.core.config import settings

HANDLER_NAME = "coach_analytics"


def setup_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure structured logging for the host application.

    Level and format default to ``LOG_LEVEL`` / ``LOG_FORMAT``. Calling it
    again replaces the handler installed by the previous call.
    """
    log_level = (log_level or settings.LOG_LEVEL).upper()
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level, logging.INFO))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def log_skipped_records(
    logger: structlog.stdlib.BoundLogger,
    record_kind: str,
    skipped: list[Any],
    total: int,
) -> None:
    """
    Log a single warning summarizing records dropped during normalization.
    Only indexes and reasons are logged, never record contents.
    """
    if not skipped:
        return

    logger.warning(
        "Skipped malformed records",
        record_kind=record_kind,
        skipped_count=len(skipped),
        total=total,
        reasons=[f"#{item.index}: {item.reason}" for item in skipped[:10]],
    )
