"""Index-addressable facade over an Array.

Integer keys read the store, string keys resolve operations, and index
assignment is validated and stored by a separately scheduled asyncio task
when an event loop is running.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Callable, Iterator

from .array import Array
from .tags import Table

logger = logging.getLogger(__name__)

OPERATIONS: frozenset[str] = frozenset(
    {
        "first",
        "last",
        "push",
        "unshift",
        "insert",
        "pop",
        "shift",
        "remove",
        "remove_value",
        "has",
        "index_of",
        "combine",
        "sort",
        "sort_mutable",
        "map",
        "find",
        "find_and_remove",
        "filter",
        "reduce",
        "every",
        "some",
        "truncate",
        "for_each",
        "values",
        "indexes",
        "to_table",
        "to_string",
        "unpack",
        "get",
        "set",
        "length",
    }
)

# Names used by scripts written against the embedding language.
ALIASES: dict[str, str] = {
    "removeValue": "remove_value",
    "indexOf": "index_of",
    "sortMutable": "sort_mutable",
    "findAndRemove": "find_and_remove",
    "forEach": "for_each",
    "toTable": "to_table",
    "toString": "to_string",
    "toText": "to_string",
}


class ArrayProxy(Table):
    def __init__(self, array: Array):
        self._array = array
        self._pending: set[asyncio.Task] = set()
        self._failure: BaseException | None = None

    @property
    def array(self) -> Array:
        return self._array

    @property
    def pending(self) -> int:
        """Scheduled writes that have not run yet."""
        return sum(1 for t in self._pending if not t.done())

    # ---- Reads -------------------------------------------------------------

    def __getitem__(self, key: object) -> object:
        if isinstance(key, int) and not isinstance(key, bool):
            return self._array.get(key)
        if isinstance(key, str):
            return self._operation(key)
        raise TypeError(f"array keys must be int or str, got {type(key).__name__}")

    def __getattr__(self, name: str) -> object:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._operation(name)
        except KeyError:
            raise AttributeError(name) from None

    def _operation(self, name: str) -> Callable:
        resolved = ALIASES.get(name, name)
        if resolved not in OPERATIONS:
            raise KeyError(name)
        method = getattr(self._array, resolved)

        @functools.wraps(method)
        def call(*args: object, **kwargs: object) -> object:
            result = method(*args, **kwargs)
            if isinstance(result, Array):
                return ArrayProxy(result)
            return result

        return call

    def __len__(self) -> int:
        return len(self._array)

    def __iter__(self) -> Iterator[object]:
        return iter(self._array)

    def __contains__(self, value: object) -> bool:
        return self._array.has(value)

    def __str__(self) -> str:
        return self._array.to_string()

    def __repr__(self) -> str:
        return f"ArrayProxy({self._array!r})"

    def to_table(self) -> list:
        return self._array.to_table()

    # ---- Writes ------------------------------------------------------------

    def __setitem__(self, key: object, value: object) -> None:
        if not isinstance(key, int) or isinstance(key, bool):
            raise TypeError(f"array index must be int, got {type(key).__name__}")
        loop = None
        if self._array.settings.deferred_writes:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                loop = None
        if loop is None:
            self._array.set(key, value)
            return
        task = loop.create_task(self._apply(key, value))
        self._pending.add(task)
        task.add_done_callback(self._write_done)
        logger.debug("typedarray.write_scheduled index=%d pending=%d", key, len(self._pending))

    async def _apply(self, index: int, value: object) -> None:
        self._array.set(index, value)

    def _write_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("typedarray.write_failed error=%s", exc)
            # only the first failure is kept for flush()
            if self._failure is None:
                self._failure = exc

    async def flush(self) -> None:
        """Wait for every scheduled write; re-raise the first failure."""
        while self._pending:
            await asyncio.wait(list(self._pending))
        if self._failure is not None:
            failure, self._failure = self._failure, None
            raise failure
