"""Middleware support: the applicator and the bundled middleware."""

from reductor.middleware.apply import EnhancedStore, apply_middleware
from reductor.middleware.defaults import middleware_from_settings
from reductor.middleware.logger import create_logger_middleware
from reductor.middleware.thunk import create_thunk_middleware, thunk

__all__ = [
    "EnhancedStore",
    "apply_middleware",
    "create_logger_middleware",
    "create_thunk_middleware",
    "middleware_from_settings",
    "thunk",
]
