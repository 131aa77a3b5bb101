"""Thunk middleware: dispatch callables instead of plain actions.

A thunk receives ``(dispatch, get_state, extra_argument)`` and may return
anything, including a coroutine the caller awaits.  Plain actions are
forwarded untouched.
"""

from __future__ import annotations

from typing import Any

from reductor.core.interfaces import Dispatch, Middleware, MiddlewareAPI


def create_thunk_middleware(extra_argument: Any = None) -> Middleware:
    def middleware(api: MiddlewareAPI):
        def wrap(next_dispatch: Dispatch) -> Dispatch:
            def dispatch(action: Any) -> Any:
                if callable(action):
                    return action(api.dispatch, api.get_state, extra_argument)
                return next_dispatch(action)

            return dispatch

        return wrap

    return middleware


thunk = create_thunk_middleware()
