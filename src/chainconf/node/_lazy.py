"""
Lazy values for ConfigNode.

A lazy value is re-evaluated on every read and never cached. Detection is
by capability: anything with a zero-argument ``__lazy_value__`` method is
treated as lazy, so callers can bring their own wrapper types.

Example:
    >>> import random
    >>> node = ConfigNode.from_map({"roll": lazy(lambda: random.randint(1, 6))})
    >>> node["roll"]  # a fresh roll on each access
    4
"""

from __future__ import annotations

import typing as _typing


@_typing.runtime_checkable
class LazyValue(_typing.Protocol):
    """Protocol for values computed on access."""

    def __lazy_value__(self) -> _typing.Any: ...


class Lazy:
    """Wraps a zero-argument callable that is invoked on every read."""

    __slots__ = ("_thunk",)

    def __init__(self, thunk: _typing.Callable[[], _typing.Any]) -> None:
        if not callable(thunk):
            raise TypeError(f"Lazy expects a callable, got {type(thunk).__name__}")
        self._thunk = thunk

    def __lazy_value__(self) -> _typing.Any:
        return self._thunk()

    def __repr__(self) -> str:
        return f"Lazy({self._thunk!r})"


def lazy(thunk: _typing.Callable[[], _typing.Any]) -> Lazy:
    """
    Wrap a callable as a lazy value.

    Usable directly or as a decorator:

        @lazy
        def pager() -> str:
            return os.environ.get("PAGER", "less")
    """
    return Lazy(thunk)


def is_lazy(value: _typing.Any) -> bool:
    """Check if a value supports the lazy-value protocol."""
    return isinstance(value, LazyValue)


def resolve(value: _typing.Any) -> _typing.Any:
    """Evaluate a lazy value, or return any other value unchanged."""
    if is_lazy(value):
        return value.__lazy_value__()
    return value
