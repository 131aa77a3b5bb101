"""Reserved action types dispatched by the store itself.

These tags are private to the library.  Each carries a random suffix
generated at import time so that no user reducer can match them by
accident.  Reducers must fall through to their default branch for any
unknown action, including these.
"""

from __future__ import annotations

import uuid

_PREFIX = "@@reductor"


def random_string(length: int = 6) -> str:
    """Return a short random string with its characters joined by dots."""
    return ".".join(uuid.uuid4().hex[:length])


class ActionTypes:
    """Namespace for the reserved action types."""

    INIT: str = f"{_PREFIX}/INIT{random_string()}"
    REPLACE: str = f"{_PREFIX}/REPLACE{random_string()}"

    @staticmethod
    def probe_unknown_action() -> str:
        """Return a fresh action type no reducer can know about."""
        return f"{_PREFIX}/PROBE_UNKNOWN_ACTION{random_string()}"

    @classmethod
    def is_reserved(cls, action_type: object) -> bool:
        return isinstance(action_type, str) and action_type.startswith(_PREFIX + "/")
