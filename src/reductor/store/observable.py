"""Minimal observable adapter over a store's ``subscribe``/``get_state``."""

from __future__ import annotations

import types
from numbers import Number
from typing import Any, Callable

from reductor.core.errors import InvalidArgumentType
from reductor.core.interfaces import Listener, State, Unsubscribe

_NON_OBSERVERS = (
    str,
    bytes,
    Number,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)


class Subscription:
    """Handle returned by ``StateObservable.subscribe``."""

    def __init__(self, unsubscribe: Unsubscribe) -> None:
        self._unsubscribe = unsubscribe

    def unsubscribe(self) -> None:
        self._unsubscribe()


class StateObservable:
    """Pushes every new state to an observer's ``next`` method."""

    def __init__(
        self,
        get_state: Callable[[], State],
        subscribe: Callable[[Listener], Unsubscribe],
    ) -> None:
        self._get_state = get_state
        self._subscribe = subscribe

    def subscribe(self, observer: Any) -> Subscription:
        """Emit the current state to *observer* now and after every change.

        Observers without a ``next`` attribute are accepted and never
        called.  ``None``, strings, numbers and bare functions are not
        observers and raise ``InvalidArgumentType``.
        """
        if observer is None or isinstance(observer, _NON_OBSERVERS):
            raise InvalidArgumentType(
                f"Expected the observer to be an object, got {type(observer).__name__}."
            )

        def observe_state() -> None:
            on_next = getattr(observer, "next", None)
            if on_next is not None:
                on_next(self._get_state())

        observe_state()
        return Subscription(self._subscribe(observe_state))

    def observable(self) -> StateObservable:
        return self
