"""Structured logging with dispatch correlation ids.

Uses structlog over stdlib logging, rendering JSON or console output.
Every log entry written while an action travels through the logger
middleware carries the ``dispatch_id`` of that action.
"""

from __future__ import annotations

import logging
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

import structlog

# Context var for dispatch_id propagation
_dispatch_id: ContextVar[str] = ContextVar("dispatch_id", default="")


def get_dispatch_id() -> str:
    """Get the current dispatch ID ("" outside a logged dispatch)."""
    return _dispatch_id.get()


def new_dispatch_id() -> str:
    """Generate a new dispatch ID."""
    return uuid.uuid4().hex[:16]


@contextmanager
def dispatch_context(dispatch_id: str | None = None) -> Iterator[str]:
    """Bind a dispatch ID for the duration of the block.

    Nested blocks (an action dispatched from inside another) get their own
    ID and restore the outer one on exit.
    """
    did = dispatch_id or new_dispatch_id()
    token = _dispatch_id.set(did)
    try:
        yield did
    finally:
        _dispatch_id.reset(token)


def _add_dispatch_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: add dispatch_id when one is bound."""
    did = get_dispatch_id()
    if did:
        event_dict.setdefault("dispatch_id", did)
    return event_dict


def setup_logging(
    level: str = "INFO",
    format: str = "json",
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for production, "console" for development.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        _add_dispatch_id,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer(default=repr))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

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
        level=log_level,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
