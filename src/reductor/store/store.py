"""The state container.

A ``Store`` holds the whole application state as one value.  The only way
to change it is ``dispatch()``: the current reducer is applied to the
current state and the action, the result becomes the new state, and every
subscribed listener is notified.

Listener bookkeeping
--------------------
Listeners live in two list references, ``_current_listeners`` (the
snapshot used by the notification round in flight) and
``_next_listeners`` (the list ``subscribe``/``unsubscribe`` mutate).
They alias each other until a mutation happens, at which point
``_next_listeners`` is cloned first.  Each dispatch swaps the reference
before notifying, so subscriptions made during a round take effect on the
next dispatch while unsubscriptions made during a round do not stop
listeners already in the snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from reductor.core.action_types import ActionTypes
from reductor.core.errors import (
    InvalidActionShape,
    InvalidArgumentType,
    ReentrantAccessError,
    ReentrantDispatchError,
)
from reductor.core.interfaces import (
    Listener,
    Reducer,
    State,
    StoreEnhancer,
    Unsubscribe,
)
from reductor.core.predicates import is_plain_object
from reductor.store.observable import StateObservable

logger = logging.getLogger(__name__)


class Store:
    """Single-writer, synchronous state container.

    Parameters
    ----------
    reducer
        Pure ``(state, action) -> state`` callable.
    preloaded_state
        Initial state handed to the reducer along with the INIT action.
        ``None`` means "no preloaded state"; reducers substitute their
        own default.
    """

    def __init__(self, reducer: Reducer, preloaded_state: State = None) -> None:
        if not callable(reducer):
            raise InvalidArgumentType(
                f"Expected the reducer to be callable, got {type(reducer).__name__}."
            )

        self._reducer: Reducer = reducer
        self._state: State = preloaded_state
        self._current_listeners: list[Listener] = []
        self._next_listeners: list[Listener] = self._current_listeners
        self._is_dispatching = False

        # Lets every reducer populate its initial state.
        self.dispatch({"type": ActionTypes.INIT})
        logger.debug("Store created with reducer %r", reducer)

    # -- Internals ---------------------------------------------------------

    def _ensure_can_mutate_next_listeners(self) -> None:
        if self._next_listeners is self._current_listeners:
            self._next_listeners = list(self._current_listeners)

    @contextmanager
    def _dispatching(self) -> Iterator[None]:
        self._is_dispatching = True
        try:
            yield
        finally:
            self._is_dispatching = False

    @property
    def is_dispatching(self) -> bool:
        return self._is_dispatching

    # -- Core API ----------------------------------------------------------

    def get_state(self) -> State:
        """Return the current state tree.

        Raises
        ------
        ReentrantAccessError
            If called while the reducer is executing.  The reducer already
            received the state as an argument.
        """
        if self._is_dispatching:
            raise ReentrantAccessError(
                "You may not call store.get_state() while the reducer is "
                "executing. The reducer has already received the state as "
                "an argument."
            )
        return self._state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """Register *listener* to be called after every dispatch.

        Returns a callable that removes the listener.  Calling it more than
        once is harmless.
        """
        if not callable(listener):
            raise InvalidArgumentType(
                f"Expected the listener to be callable, got {type(listener).__name__}."
            )
        if self._is_dispatching:
            raise ReentrantAccessError(
                "You may not call store.subscribe() while the reducer is "
                "executing. Subscribe outside the reducer and call "
                "store.get_state() in the listener instead."
            )

        is_subscribed = True
        self._ensure_can_mutate_next_listeners()
        self._next_listeners.append(listener)

        def unsubscribe() -> None:
            nonlocal is_subscribed
            if not is_subscribed:
                return
            if self._is_dispatching:
                raise ReentrantAccessError(
                    "You may not unsubscribe from a store listener while "
                    "the reducer is executing."
                )
            is_subscribed = False
            self._ensure_can_mutate_next_listeners()
            self._next_listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Any) -> Any:
        """Apply *action* to the state and notify listeners.

        Returns the action unchanged.

        Raises
        ------
        InvalidActionShape
            If *action* is not a plain ``dict`` or has no ``type``.
        ReentrantDispatchError
            If a dispatch is already in progress.
        """
        if not is_plain_object(action):
            raise InvalidActionShape(
                f"Actions must be plain dicts, got {type(action).__name__}. "
                "Use custom middleware for async actions."
            )
        if action.get("type") is None:
            raise InvalidActionShape(
                'Actions may not have an undefined "type" key. '
                "Have you misspelled a constant?"
            )
        if self._is_dispatching:
            raise ReentrantDispatchError("Reducers may not dispatch actions.")

        with self._dispatching():
            self._state = self._reducer(self._state, action)

        listeners = self._current_listeners = self._next_listeners
        for i in range(len(listeners)):
            listeners[i]()

        return action

    def replace_reducer(self, next_reducer: Reducer) -> None:
        """Swap the active reducer and recompute state with REPLACE."""
        if not callable(next_reducer):
            raise InvalidArgumentType(
                "Expected the next reducer to be callable, got "
                f"{type(next_reducer).__name__}."
            )
        self._reducer = next_reducer
        logger.debug("Reducer replaced with %r", next_reducer)
        self.dispatch({"type": ActionTypes.REPLACE})

    def observable(self) -> StateObservable:
        """Return a minimal observable of state changes."""
        return StateObservable(self.get_state, self.subscribe)


def create_store(
    reducer: Reducer,
    preloaded_state: State = None,
    enhancer: StoreEnhancer | None = None,
) -> Any:
    """Create a store, optionally passing construction through *enhancer*.

    If *preloaded_state* is callable and *enhancer* is omitted, it is taken
    as the enhancer.  With an enhancer the result of
    ``enhancer(create_store)(reducer, preloaded_state)`` is returned as is.
    """
    if callable(preloaded_state) and enhancer is None:
        enhancer = preloaded_state
        preloaded_state = None

    if enhancer is not None:
        if not callable(enhancer):
            raise InvalidArgumentType(
                f"Expected the enhancer to be callable, got {type(enhancer).__name__}."
            )
        return enhancer(create_store)(reducer, preloaded_state)

    return Store(reducer, preloaded_state)
