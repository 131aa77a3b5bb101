"""Bind action creators to a dispatch function."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from reductor.core.errors import InvalidArgumentType
from reductor.core.interfaces import Dispatch


def _bind(creator: Callable[..., Any], dispatch: Dispatch) -> Callable[..., Any]:
    def bound(*args: Any, **kwargs: Any) -> Any:
        return dispatch(creator(*args, **kwargs))

    bound.__name__ = getattr(creator, "__name__", "bound_action_creator")
    bound.__doc__ = getattr(creator, "__doc__", None)
    return bound


def bind_action_creators(creators: Any, dispatch: Dispatch) -> Any:
    """Wrap action creators so calling them dispatches the result.

    Accepts a single callable (returns one bound callable) or a mapping of
    names to creators (returns a ``dict`` of the callable entries, bound).
    """
    if callable(creators):
        return _bind(creators, dispatch)

    if not isinstance(creators, Mapping):
        raise InvalidArgumentType(
            "bind_action_creators expected a callable or a mapping, got "
            f"{type(creators).__name__}."
        )

    return {
        key: _bind(creator, dispatch)
        for key, creator in creators.items()
        if callable(creator)
    }
