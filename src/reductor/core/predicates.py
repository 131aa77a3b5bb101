"""Structural predicates for action records."""

from __future__ import annotations

from typing import Any


def is_plain_object(value: Any) -> bool:
    """Return ``True`` if *value* is a plain data record.

    Any ``dict`` instance qualifies, so ``OrderedDict`` values, ``TypedDict``
    values and JSON-decoded payloads are all accepted.  Class instances,
    sequences, callables and ``None`` are not.
    """
    return isinstance(value, dict)


def is_action(value: Any) -> bool:
    """Return ``True`` if *value* is a plain record with a defined ``type``."""
    return is_plain_object(value) and value.get("type") is not None
