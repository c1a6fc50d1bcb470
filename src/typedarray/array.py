"""Typed array: an owned 1-based store plus the functional operation set."""

from __future__ import annotations

from typing import Callable, Iterator, Sequence

from .encode import Encoder, encode
from .errors import EmptyReduce, IndexOutOfRange, InvalidPreset, ValueNotFound
from .iteration import Indexes, Values, lenient
from .settings import DEFAULT_SETTINGS, Settings
from .sort import Comparator, less_than, quicksort
from .tags import TAG_ANY, Tag, Table, assert_valid, parse_tag, values_equal

_MISSING = object()


def _elements_of(source: object) -> list:
    if isinstance(source, Table):
        return source.to_table()
    if isinstance(source, (list, tuple)):
        return list(source)
    raise InvalidPreset(f"expected a sequence, got {type(source).__name__}")


class Array(Table):
    """A dense, 1-based, runtime-typed dynamic array.

    Every element satisfies `elem_type` unless it is `any` or `unknown`.
    Operations that build a new array always give it a fresh store.
    """

    def __init__(
        self,
        elem_type: str | Tag = TAG_ANY,
        preset: Sequence | None = None,
        *,
        settings: Settings | None = None,
    ):
        self.elem_type = parse_tag(elem_type)
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        store: list = [] if preset is None else _elements_of(preset)
        for v in store:
            assert_valid(self.elem_type, v)
        self._store = store

    def _derive(self, elem_type: Tag, store: list) -> Array:
        return Array(elem_type, store, settings=self.settings)

    # ---- Python protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[object]:
        for v, _ in self.values():
            yield v

    def __contains__(self, value: object) -> bool:
        return self.has(value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Array({self.elem_type.kind!r}, {self._store!r})"

    # ---- Explicit access ---------------------------------------------------

    def length(self) -> int:
        return len(self._store)

    def get(self, index: int) -> object:
        if 1 <= index <= len(self._store):
            return self._store[index - 1]
        return None

    def set(self, index: int, value: object) -> None:
        """Replace the element at `index`, or append at `length() + 1`."""
        n = len(self._store)
        if index < 1 or index > n + 1:
            raise IndexOutOfRange(index, n, "set")
        assert_valid(self.elem_type, value)
        if index == n + 1:
            self._store.append(value)
        else:
            self._store[index - 1] = value

    def first(self) -> object:
        return self._store[0] if self._store else None

    def last(self) -> object:
        return self._store[-1] if self._store else None

    # ---- Iteration ---------------------------------------------------------

    def indexes(self) -> Indexes:
        return Indexes(self._store)

    def values(self) -> Values:
        return Values(self._store)

    # ---- Mutation ----------------------------------------------------------

    def push(self, *values: object) -> None:
        for v in values:
            assert_valid(self.elem_type, v)
        self._store.extend(values)

    def unshift(self, *values: object) -> None:
        """Insert each value at position 1 in turn (so the last ends up first)."""
        for v in values:
            assert_valid(self.elem_type, v)
        for v in values:
            self._store.insert(0, v)

    def insert(self, value: object, index: int) -> None:
        n = len(self._store)
        if index < 1 or index > n + 1:
            raise IndexOutOfRange(index, n, "insert")
        assert_valid(self.elem_type, value)
        self._store.insert(index - 1, value)

    def pop(self) -> object:
        if not self._store:
            return None
        return self._store.pop()

    def shift(self) -> object:
        if not self._store:
            return None
        return self._store.pop(0)

    def remove(self, index: int) -> object:
        n = len(self._store)
        if index < 1 or index > n:
            raise IndexOutOfRange(index, n, "remove")
        return self._store.pop(index - 1)

    def remove_value(self, value: object) -> None:
        index = self.index_of(value)
        if index is None:
            raise ValueNotFound(value)
        self.remove(index)

    def sort_mutable(self, comparator: Comparator | None = None) -> None:
        quicksort(self._store, comparator or less_than)

    # ---- Queries -----------------------------------------------------------

    def has(self, value: object) -> bool:
        return self.index_of(value) is not None

    def index_of(self, value: object) -> int | None:
        for v, i in self.values():
            if values_equal(v, value):
                return i
        return None

    def _find_entry(self, predicate: Callable) -> tuple[object, int] | None:
        pred = lenient(predicate)
        for v, i in self.values():
            if pred(v, i):
                return v, i
        return None

    def find(self, predicate: Callable) -> object:
        entry = self._find_entry(predicate)
        return None if entry is None else entry[0]

    def find_and_remove(self, predicate: Callable) -> object:
        entry = self._find_entry(predicate)
        if entry is None:
            return None
        self.remove_value(entry[0])
        return entry[0]

    def every(self, predicate: Callable) -> bool:
        if not self._store:
            return self.settings.strict_every
        pred = lenient(predicate)
        for v, i in self.values():
            if not pred(v, i):
                return False
        return True

    def some(self, predicate: Callable) -> bool:
        pred = lenient(predicate)
        for v, i in self.values():
            if pred(v, i):
                return True
        return False

    # ---- Derived arrays ----------------------------------------------------

    def combine(self, *others: object) -> Array:
        out = self._derive(self.elem_type, list(self._store))
        for other in others:
            if not isinstance(other, (Table, list, tuple)):
                raise TypeError(f"combine expects arrays, got {type(other).__name__}")
            out.push(*_elements_of(other))
        return out

    def sort(self, comparator: Comparator | None = None) -> Array:
        items = list(self._store)
        quicksort(items, comparator or less_than)
        return self._derive(self.elem_type, items)

    def map(self, transform: Callable) -> Array:
        fn = lenient(transform)
        return self._derive(TAG_ANY, [fn(v, i) for v, i in self.values()])

    def filter(self, predicate: Callable) -> Array:
        pred = lenient(predicate)
        return self._derive(self.elem_type, [v for v, i in self.values() if pred(v, i)])

    def truncate(self, count: int) -> Array:
        """Elements before index `count` (through `count` with strict_truncate)."""
        stop = count + 1 if self.settings.strict_truncate else count
        kept: list = []
        for v, i in self.values():
            if i >= stop:
                break
            kept.append(v)
        return self._derive(self.elem_type, kept)

    def reduce(self, accumulate: Callable, initial: object = _MISSING) -> object:
        fn = lenient(accumulate)
        it = iter(self.values())
        if initial is _MISSING:
            head = next(it, None)
            if head is None:
                raise EmptyReduce()
            acc = head[0]
        else:
            acc = initial
        for v, i in it:
            acc = fn(acc, v, i)
        return acc

    def for_each(self, callback: Callable) -> None:
        fn = lenient(callback)
        for v, i in self.values():
            fn(v, i)

    # ---- Conversion --------------------------------------------------------

    def to_table(self) -> list:
        return list(self._store)

    def unpack(self) -> tuple:
        return tuple(self._store)

    def to_string(self, encoder: Encoder | None = None) -> str:
        return encode(self, encoder)
