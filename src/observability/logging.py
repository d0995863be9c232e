"""
Structured logging configuration using structlog.

Log lines go to stderr so that scores printed on stdout stay
machine-readable. Production (or LOG_JSON=true) gets one JSON object per
line; everything else gets the structlog console renderer.
"""

import logging
import sys

import structlog
from structlog.types import Processor

from src.config.settings import Settings, get_settings


def _renderer_chain(settings: Settings) -> list[Processor]:
    """Final processors that turn an event dict into a line of text."""
    if settings.is_production or settings.log_json:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(level: str | None = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Log level overriding the LOG_LEVEL setting

    Usage:
        setup_logging()
        logger = get_logger(__name__)
        logger.info("Word lexicon loaded", entries=7520)
    """
    settings = get_settings()

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    processors.extend(_renderer_chain(settings))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level or settings.log_level),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, named after the calling module by convention."""
    return structlog.get_logger(name)
