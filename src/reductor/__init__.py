"""reductor: a single-writer, synchronous state container.

The whole application state lives in one ``Store``.  It changes only when
an action is dispatched, by applying the reducer to the current state and
the action.  Listeners are notified after every change.  Middleware wraps
``dispatch`` to add logging, thunks or any other cross-cutting behaviour.
"""

from reductor.core.action_types import ActionTypes
from reductor.core.compose import compose
from reductor.core.config import Settings, load_settings
from reductor.core.errors import (
    ConfigError,
    InvalidActionShape,
    InvalidArgumentType,
    ReducerShapeError,
    ReductorError,
    ReentrancyError,
    ReentrantAccessError,
    ReentrantConstructionError,
    ReentrantDispatchError,
)
from reductor.core.interfaces import IStore, MiddlewareAPI
from reductor.core.predicates import is_action, is_plain_object
from reductor.middleware import (
    EnhancedStore,
    apply_middleware,
    create_logger_middleware,
    create_thunk_middleware,
    middleware_from_settings,
    thunk,
)
from reductor.store import StateObservable, Store, Subscription, create_store
from reductor.utils import bind_action_creators, combine_reducers

__all__ = [
    "ActionTypes",
    "ConfigError",
    "EnhancedStore",
    "IStore",
    "InvalidActionShape",
    "InvalidArgumentType",
    "MiddlewareAPI",
    "ReducerShapeError",
    "ReductorError",
    "ReentrancyError",
    "ReentrantAccessError",
    "ReentrantConstructionError",
    "ReentrantDispatchError",
    "Settings",
    "StateObservable",
    "Store",
    "Subscription",
    "apply_middleware",
    "bind_action_creators",
    "combine_reducers",
    "compose",
    "create_logger_middleware",
    "create_store",
    "create_thunk_middleware",
    "is_action",
    "is_plain_object",
    "load_settings",
    "middleware_from_settings",
    "thunk",
]
