"""Property tests: store and composition invariants.

Uses hypothesis to generate action sequences and middleware stacks and
verifies that:
- the store state always equals a fold of the reducer over the actions,
- dispatch returns the very action it was given,
- invalid actions never change state or notify listeners,
- compose() matches nested application,
- middleware pre/post logic always nests as an onion.
"""

from __future__ import annotations

from functools import reduce

import pytest
from hypothesis import given, settings, strategies as st

from reductor.core.compose import compose
from reductor.core.errors import InvalidActionShape
from reductor.middleware.apply import apply_middleware
from reductor.store.store import create_store


def _reducer(state, action):
    if state is None:
        state = 0
    kind = action["type"]
    if kind == "ADD":
        return state + action["amount"]
    if kind == "MUL":
        return state * action["amount"]
    if kind == "RESET":
        return 0
    return state


_actions = st.one_of(
    st.fixed_dictionaries(
        {"type": st.sampled_from(["ADD", "MUL"]), "amount": st.integers(-5, 5)}
    ),
    st.just({"type": "RESET"}),
    st.fixed_dictionaries(
        {"type": st.text(min_size=1, max_size=8).filter(lambda t: t not in {"ADD", "MUL"})}
    ),
)

_invalid = st.one_of(
    st.just({}),
    st.just({"type": None}),
    st.integers(),
    st.text(),
    st.lists(st.integers(), max_size=3),
    st.none(),
)


@given(
    preloaded=st.integers(-100, 100),
    actions=st.lists(_actions, max_size=30),
)
@settings(max_examples=200)
def test_state_is_fold_of_reducer(preloaded, actions):
    store = create_store(_reducer, preloaded)
    expected = preloaded
    for action in actions:
        assert store.dispatch(action) is action
        expected = _reducer(expected, action)
        assert store.get_state() == expected


@given(
    actions=st.lists(_actions, max_size=10),
    bad=_invalid,
)
def test_invalid_actions_have_no_effect(actions, bad):
    store = create_store(_reducer)
    for action in actions:
        store.dispatch(action)
    before = store.get_state()

    calls = []
    store.subscribe(lambda: calls.append(True))
    with pytest.raises(InvalidActionShape):
        store.dispatch(bad)

    assert store.get_state() == before
    assert calls == []


@given(
    listener_count=st.integers(0, 8),
    actions=st.lists(_actions, min_size=1, max_size=10),
)
def test_every_listener_notified_once_per_dispatch(listener_count, actions):
    store = create_store(_reducer)
    counts = [0] * listener_count
    for i in range(listener_count):
        def listener(i=i):
            counts[i] += 1

        store.subscribe(listener)

    for action in actions:
        store.dispatch(action)

    assert counts == [len(actions)] * listener_count


@given(
    offsets=st.lists(st.integers(-10, 10), max_size=6),
    x=st.integers(-1000, 1000),
)
def test_compose_matches_nested_application(offsets, x):
    funcs = [lambda v, k=k: v * 2 + k for k in offsets]
    expected = reduce(lambda acc, f: f(acc), reversed(funcs), x)
    assert compose(*funcs)(x) == expected


@given(depth=st.integers(0, 6))
def test_middleware_onion_order(depth):
    log = []

    def layer(name):
        def middleware(api):
            def wrap(next_dispatch):
                def dispatch(action):
                    log.append(("before", name))
                    result = next_dispatch(action)
                    log.append(("after", name))
                    return result

                return dispatch

            return wrap

        return middleware

    store = create_store(
        _reducer, apply_middleware(*(layer(i) for i in range(depth)))
    )
    action = {"type": "ADD", "amount": 1}
    assert store.dispatch(action) is action

    names = list(range(depth))
    assert log == [("before", n) for n in names] + [
        ("after", n) for n in reversed(names)
    ]
    assert store.get_state() == 1
