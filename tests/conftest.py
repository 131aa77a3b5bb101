"""Shared fixtures for the reductor test suite."""

from __future__ import annotations

from typing import Any

import pytest

from reductor.store.store import Store, create_store


# ---------------------------------------------------------------------------
# Reducers
# ---------------------------------------------------------------------------

def counter(state: Any, action: dict[str, Any]) -> int:
    """Counter reducer defaulting to 0."""
    if state is None:
        state = 0
    if action["type"] == "INCREMENT":
        return state + 1
    if action["type"] == "DECREMENT":
        return state - 1
    if action["type"] == "ADD":
        return state + action["amount"]
    return state


def todos(state: Any, action: dict[str, Any]) -> list[dict[str, Any]]:
    """Todo-list reducer defaulting to an empty list."""
    if state is None:
        state = []
    if action["type"] == "ADD_TODO":
        next_id = max((t["id"] for t in state), default=0) + 1
        return [*state, {"id": next_id, "text": action["text"]}]
    return state


class ActionRecorder:
    """Reducer wrapper remembering every action it saw."""

    def __init__(self, reducer=counter) -> None:
        self.reducer = reducer
        self.actions: list[dict[str, Any]] = []

    def __call__(self, state: Any, action: dict[str, Any]) -> Any:
        self.actions.append(action)
        return self.reducer(state, action)

    @property
    def types(self) -> list[Any]:
        return [a["type"] for a in self.actions]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def counter_reducer():
    return counter


@pytest.fixture
def todos_reducer():
    return todos


@pytest.fixture
def recorder() -> ActionRecorder:
    return ActionRecorder()


@pytest.fixture
def store() -> Store:
    """A counter store starting at 0."""
    return create_store(counter)
