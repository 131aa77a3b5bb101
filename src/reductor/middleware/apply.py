"""Store enhancer that installs a middleware chain in front of dispatch.

Each middleware has the shape::

    def middleware(api: MiddlewareAPI):
        def wrap(next_dispatch):
            def dispatch(action):
                ...
                return next_dispatch(action)
            return dispatch
        return wrap

For ``apply_middleware(m1, m2, m3)`` the resulting dispatch is
``m1(m2(m3(store.dispatch)))``: pre-forward logic runs m1 first and
post-forward logic unwinds back to m1 last.

Every ``MiddlewareAPI`` handed out dispatches through one shared
``_DispatchCell``.  The cell raises until the chain is wired, so a
middleware that dispatches from its own factory body cannot silently skip
the layers that are not installed yet.
"""

from __future__ import annotations

import logging
from typing import Any

from reductor.core.compose import compose
from reductor.core.errors import ReentrantConstructionError
from reductor.core.interfaces import (
    Dispatch,
    IStore,
    Listener,
    Middleware,
    MiddlewareAPI,
    Reducer,
    State,
    StoreCreator,
    StoreEnhancer,
    Unsubscribe,
)

logger = logging.getLogger(__name__)


def _dispatch_during_construction(*args: Any, **kwargs: Any) -> Any:
    raise ReentrantConstructionError(
        "Dispatching while constructing your middleware is not allowed. "
        "Other middleware would not be applied to this dispatch."
    )


class _DispatchCell:
    """Mutable indirection slot for the fully wired dispatch."""

    __slots__ = ("target",)

    def __init__(self) -> None:
        self.target: Dispatch = _dispatch_during_construction

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.target(*args, **kwargs)


class EnhancedStore:
    """A store whose ``dispatch`` runs through a middleware chain.

    Every other operation is delegated to the wrapped base store.
    """

    def __init__(self, base: IStore, dispatch: Dispatch) -> None:
        self._base = base
        self.dispatch: Dispatch = dispatch

    @property
    def base(self) -> IStore:
        return self._base

    @property
    def is_dispatching(self) -> bool:
        return self._base.is_dispatching

    def get_state(self) -> State:
        return self._base.get_state()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        return self._base.subscribe(listener)

    def replace_reducer(self, next_reducer: Reducer) -> None:
        self._base.replace_reducer(next_reducer)

    def observable(self) -> Any:
        return self._base.observable()


def apply_middleware(*middlewares: Middleware) -> StoreEnhancer:
    """Create a store enhancer applying *middlewares* to ``dispatch``.

    Because middleware may be asynchronous, this should be the first
    enhancer in a composition chain.
    """

    def enhancer(create_store: StoreCreator) -> StoreCreator:
        def create(reducer: Reducer, preloaded_state: State = None) -> EnhancedStore:
            store = create_store(reducer, preloaded_state)

            cell = _DispatchCell()
            api = MiddlewareAPI(get_state=store.get_state, dispatch=cell)
            chain = [middleware(api) for middleware in middlewares]
            cell.target = compose(*chain)(store.dispatch)

            logger.debug("Applied %d middleware(s)", len(chain))
            return EnhancedStore(store, cell.target)

        return create

    return enhancer
