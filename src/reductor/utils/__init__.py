"""Reducer and action-creator helpers."""

from reductor.utils.bind import bind_action_creators
from reductor.utils.combine import combine_reducers

__all__ = ["bind_action_creators", "combine_reducers"]
