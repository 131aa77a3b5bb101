"""Custom exception hierarchy for the state container."""


class ReductorError(Exception):
    """Base exception for all state container errors."""


# --- Configuration ---
class ConfigError(ReductorError):
    """Invalid or missing configuration."""


# --- Call boundary ---
class InvalidArgumentType(ReductorError, TypeError):
    """A reducer, enhancer, listener or observer is not of the expected kind."""


class InvalidActionShape(ReductorError, TypeError):
    """Dispatched value is not a plain record or has no ``type``."""


# --- Reducers ---
class ReducerShapeError(ReductorError, ValueError):
    """A reducer returned ``None`` where a state slice was required."""


# --- Reentrancy ---
class ReentrancyError(ReductorError, RuntimeError):
    """A store operation was invoked while a dispatch is in progress."""


class ReentrantDispatchError(ReentrancyError):
    """``dispatch()`` called while another dispatch is in progress."""


class ReentrantAccessError(ReentrancyError):
    """``get_state()``/``subscribe()``/``unsubscribe()`` called mid-dispatch."""


class ReentrantConstructionError(ReentrancyError):
    """Middleware dispatched before the middleware chain was wired."""
