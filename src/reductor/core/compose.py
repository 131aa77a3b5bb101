"""Right-to-left function composition."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable


def _identity(arg: Any) -> Any:
    return arg


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """Compose single-argument functions from right to left.

    ``compose(f, g, h)`` is equivalent to
    ``lambda *args, **kwargs: f(g(h(*args, **kwargs)))``.  The rightmost
    function may take any signature; the rest take the previous result.

    With no arguments the identity function is returned.  With a single
    argument that function is returned unchanged.
    """
    if not funcs:
        return _identity
    if len(funcs) == 1:
        return funcs[0]

    def _pair(
        outer: Callable[..., Any], inner: Callable[..., Any]
    ) -> Callable[..., Any]:
        def composed(*args: Any, **kwargs: Any) -> Any:
            return outer(inner(*args, **kwargs))

        return composed

    return reduce(_pair, funcs)
