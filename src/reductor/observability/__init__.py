"""Logging setup for applications embedding a store."""

from reductor.observability.logger import (
    dispatch_context,
    get_dispatch_id,
    get_logger,
    setup_logging,
)

__all__ = ["dispatch_context", "get_dispatch_id", "get_logger", "setup_logging"]
