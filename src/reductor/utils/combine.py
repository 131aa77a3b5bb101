"""Combine several slice reducers into one reducer over a ``dict`` state.

Each key of the mapping owns the same key of the state.  The combined
reducer hands every slice reducer its own slice and assembles the results
into a new ``dict``, returning the previous state object untouched when
no slice changed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from reductor.core.action_types import ActionTypes
from reductor.core.errors import ReducerShapeError
from reductor.core.interfaces import Action, Reducer, State
from reductor.core.predicates import is_plain_object

logger = logging.getLogger(__name__)


def _assert_reducer_shape(reducers: Mapping[str, Reducer]) -> None:
    for key, reducer in reducers.items():
        initial_state = reducer(None, {"type": ActionTypes.INIT})
        if initial_state is None:
            raise ReducerShapeError(
                f'Reducer "{key}" returned None during initialization. '
                "If the state passed to the reducer is None, you must "
                "explicitly return the initial state."
            )

        probe = ActionTypes.probe_unknown_action()
        if reducer(None, {"type": probe}) is None:
            raise ReducerShapeError(
                f'Reducer "{key}" returned None when probed with a random '
                "type. Don't try to handle reserved @@reductor/* action "
                "types; return the current state for any unknown action."
            )


def _unexpected_keys(
    state: Any,
    reducers: Mapping[str, Reducer],
    action: Action,
    seen: set[str],
) -> list[str]:
    if not reducers:
        logger.warning(
            "Store does not have a valid reducer. Make sure the mapping "
            "passed to combine_reducers contains callable reducers."
        )
        return []

    if not is_plain_object(state):
        logger.warning(
            "The state has unexpected type %s. Expected a dict with keys: %s",
            type(state).__name__,
            ", ".join(reducers),
        )
        return []

    unexpected = [k for k in state if k not in reducers and k not in seen]
    seen.update(unexpected)
    if action.get("type") == ActionTypes.REPLACE:
        return []
    return unexpected


def combine_reducers(reducers: Mapping[str, Reducer]) -> Reducer:
    """Return one reducer delegating each state key to its own reducer.

    Non-callable values in *reducers* are skipped with a warning.  Slice
    reducers must return their initial state when given ``None`` and must
    never return ``None``; violations raise ``ReducerShapeError`` from the
    combined reducer.
    """
    final_reducers: dict[str, Reducer] = {}
    for key, reducer in reducers.items():
        if reducer is None:
            logger.warning('No reducer provided for key "%s"', key)
            continue
        if not callable(reducer):
            logger.warning(
                'Reducer for key "%s" is not callable (%s); skipping',
                key,
                type(reducer).__name__,
            )
            continue
        final_reducers[key] = reducer

    shape_error: ReducerShapeError | None = None
    try:
        _assert_reducer_shape(final_reducers)
    except ReducerShapeError as exc:
        shape_error = exc

    seen_unexpected: set[str] = set()

    def combination(state: State, action: Action) -> State:
        if shape_error is not None:
            raise shape_error
        if state is None:
            state = {}

        unexpected = _unexpected_keys(state, final_reducers, action, seen_unexpected)
        # Slices of a non-dict state are read as missing.
        slices = state if is_plain_object(state) else {}
        if unexpected:
            logger.warning(
                "Unexpected key(s) %s found in the state; expected one of %s. "
                "Unexpected keys will be ignored.",
                ", ".join(repr(k) for k in unexpected),
                ", ".join(repr(k) for k in final_reducers),
            )

        has_changed = False
        next_state: dict[str, Any] = {}
        for key, reducer in final_reducers.items():
            previous = slices.get(key)
            updated = reducer(previous, action)
            if updated is None:
                action_type = action.get("type")
                handling = (
                    "a reserved @@reductor action"
                    if ActionTypes.is_reserved(action_type)
                    else f'"{action_type}"'
                )
                raise ReducerShapeError(
                    f'Reducer "{key}" returned None when handling {handling}. '
                    "To ignore an action, you must explicitly return the "
                    "previous state."
                )
            next_state[key] = updated
            has_changed = has_changed or updated is not previous

        has_changed = (
            has_changed
            or slices is not state
            or len(final_reducers) != len(slices)
        )
        return next_state if has_changed else state

    return combination
