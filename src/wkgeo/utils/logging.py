"""Structured logging configuration using structlog.

Provides a correlation context naming the input being decoded and
configurable output formats (JSON for production, colored console for dev).
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from wkgeo.config import settings

# Context variables for correlation IDs
_source: ContextVar[str | None] = ContextVar("source", default=None)
_srid: ContextVar[int | None] = ContextVar("srid", default=None)


def set_correlation_context(
    source: str | None = None,
    srid: int | None = None,
) -> None:
    """Set correlation values for the current context.

    Args:
        source: Identifier of the input being decoded (file name, row key).
        srid: Default SRID the input is being decoded with.
    """
    if source is not None:
        _source.set(source)
    if srid is not None:
        _srid.set(srid)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _source.set(None)
    _srid.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation values to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    source = _source.get()
    srid = _srid.get()

    if source is not None:
        event_dict["source"] = source
    if srid is not None:
        event_dict["srid"] = srid

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Diagnostics go to stderr so CLI output on stdout stays machine-readable
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper()),
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
