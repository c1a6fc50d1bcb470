"""Lazy, restartable index and (value, index) sequences over a store."""

from __future__ import annotations

import inspect
import types
from typing import Callable, Iterator


class Indexes:
    """Yields 1..N, N being the store length when the sequence was made.

    Every `iter()` starts a fresh cursor.
    """

    def __init__(self, store: list):
        self.count = len(store)

    def __iter__(self) -> Iterator[int]:
        i = 1
        while i <= self.count:
            yield i
            i += 1

    def __len__(self) -> int:
        return self.count


class Values:
    """Yields (value, index) pairs, looking each index up on demand.

    Stops at the first index that is no longer in the store.
    """

    def __init__(self, store: list):
        self._store = store
        self._indexes = Indexes(store)

    def __iter__(self) -> Iterator[tuple[object, int]]:
        store = self._store
        for i in self._indexes:
            if i > len(store):
                return
            yield store[i - 1], i


def _positional_limit(fn: Callable) -> int | None:
    """How many positional args `fn` takes, or None when unbounded/unknown."""
    # builtin conversions (str, int, bool, ...) take the value only
    if isinstance(fn, type) and fn.__module__ == "builtins":
        return 1
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        if isinstance(fn, types.BuiltinFunctionType):
            return 1
        return None
    count = 0
    for p in sig.parameters.values():
        if p.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if p.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def lenient(fn: Callable) -> Callable:
    """Wrap `fn` so surplus trailing positional args are dropped."""
    limit = _positional_limit(fn)
    if limit is None:
        return fn

    def call(*args: object) -> object:
        return fn(*args[:limit])

    return call
