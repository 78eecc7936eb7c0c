"""Structured logging configuration.

Uses structlog for structured, contextual logging. Output is attached to the
``result_flow`` logger only, so host applications keep control of the root
logger and of their own structlog configuration.
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

PACKAGE_LOGGER = "result_flow"

_configured = False
_handlers: list[logging.Handler] = []

# Shared processors
_shared_processors: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.TimeStamper(fmt="iso"),
]


def configure_logging(
    level: str = "WARNING",
    log_format: str = "console",
    log_file: str | None = None,
    propagate: bool = True,
) -> None:
    """Configure structured logging for the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "console")
        log_file: Optional log file path
        propagate: Whether records also reach the host's handlers
    """
    global _configured

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in _handlers:
        package_logger.removeHandler(old)
        old.close()
    _handlers.clear()

    _handlers.append(handler)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)

    for new in _handlers:
        package_logger.addHandler(new)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = propagate

    _configured = True


def _configure_on_first_event(logger: Any, method_name: str, event_dict: Any) -> Any:
    if not _configured:
        from result_flow.shared.config import get_settings

        settings = get_settings()
        configure_logging(level=settings.log_level, log_format=settings.log_format)
    return event_dict


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Logging is configured from settings when the first event is emitted,
    unless configure_logging() was called before.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structured logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        processors=[
            _configure_on_first_event,
            structlog.stdlib.filter_by_level,
            *_shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
