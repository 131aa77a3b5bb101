"""Structured logging middleware.

Emits one ``action_dispatched`` event per action that reaches it, with the
action type and the time spent in the rest of the chain.  Callables and
other non-record values are logged with their Python type name.
"""

from __future__ import annotations

import time
from typing import Any

import structlog

from reductor.core.interfaces import Dispatch, Middleware, MiddlewareAPI
from reductor.core.predicates import is_plain_object
from reductor.observability.logger import dispatch_context, get_logger


def _action_type(action: Any) -> str:
    if is_plain_object(action):
        return str(action.get("type"))
    return type(action).__name__


def create_logger_middleware(
    logger: structlog.stdlib.BoundLogger | None = None,
    *,
    log_state: bool = False,
) -> Middleware:
    """Build a middleware logging every dispatched action.

    Args:
        logger: Structlog logger to write to (defaults to this module's).
        log_state: Also log the state before and after the action.
    """
    log = logger if logger is not None else get_logger(__name__)

    def middleware(api: MiddlewareAPI):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                action_type = _action_type(action)
                fields: dict[str, Any] = {}
                if log_state:
                    fields["prev_state"] = api.get_state()

                with dispatch_context() as dispatch_id:
                    started = time.perf_counter()
                    try:
                        result = next_dispatch(action)
                    except Exception:
                        log.exception(
                            "action_failed",
                            action_type=action_type,
                            dispatch_id=dispatch_id,
                        )
                        raise
                    duration_ms = (time.perf_counter() - started) * 1000.0

                    if log_state:
                        fields["next_state"] = api.get_state()
                    log.info(
                        "action_dispatched",
                        action_type=action_type,
                        dispatch_id=dispatch_id,
                        duration_ms=round(duration_ms, 3),
                        **fields,
                    )
                return result

            return dispatch

        return wrap

    return middleware
