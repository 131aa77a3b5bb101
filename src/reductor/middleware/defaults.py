"""Default middleware stack derived from settings."""

from __future__ import annotations

from reductor.core.config import Settings
from reductor.core.interfaces import Middleware
from reductor.middleware.logger import create_logger_middleware
from reductor.middleware.thunk import thunk


def middleware_from_settings(settings: Settings) -> list[Middleware]:
    """Return ``[thunk]`` plus the logger middleware when enabled.

    Thunk comes first so the logger only sees actions bound for the store.
    """
    chain: list[Middleware] = [thunk]
    if settings.middleware.log_actions:
        chain.append(create_logger_middleware(log_state=settings.middleware.log_state))
    return chain
