"""Protocol interfaces and type aliases shared across the package.

Store implementations (the raw ``Store`` and the middleware-wrapped
``EnhancedStore``) both satisfy ``IStore``, so callers never need to know
whether an enhancer was applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

Action = dict[str, Any]
State = Any
Reducer = Callable[[State, Action], State]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
Dispatch = Callable[[Any], Any]
StoreCreator = Callable[..., "IStore"]
StoreEnhancer = Callable[[StoreCreator], StoreCreator]


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IStore(Protocol):
    """Single-writer state container."""

    @property
    def is_dispatching(self) -> bool: ...

    def dispatch(self, action: Any) -> Any: ...

    def subscribe(self, listener: Listener) -> Unsubscribe: ...

    def get_state(self) -> State: ...

    def replace_reducer(self, next_reducer: Reducer) -> None: ...

    def observable(self) -> Any: ...


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MiddlewareAPI:
    """Capabilities handed to every middleware factory."""

    get_state: Callable[[], State]
    dispatch: Dispatch


Middleware = Callable[[MiddlewareAPI], Callable[[Dispatch], Dispatch]]
