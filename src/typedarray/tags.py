"""Element type tags and the runtime tag validator.

The tag set is closed: the primitive kinds of the embedding language plus
the opaque engine kinds, and the two wildcards `any` and `unknown` which
disable checking.
"""

from __future__ import annotations

from dataclasses import dataclass
import inspect

from .errors import TypeMismatch, UnknownTag


@dataclass(frozen=True)
class Tag:
    kind: str

    def display(self) -> str:
        return self.kind

    @property
    def is_wildcard(self) -> bool:
        return self.kind in ("any", "unknown")


TAG_NIL = Tag("nil")
TAG_BOOLEAN = Tag("boolean")
TAG_NUMBER = Tag("number")
TAG_STRING = Tag("string")
TAG_FUNCTION = Tag("function")
TAG_TABLE = Tag("table")
TAG_THREAD = Tag("thread")
TAG_BUFFER = Tag("buffer")
TAG_USERDATA = Tag("userdata")
TAG_ANY = Tag("any")
TAG_UNKNOWN = Tag("unknown")

TAGS: dict[str, Tag] = {
    t.kind: t
    for t in (
        TAG_NIL,
        TAG_BOOLEAN,
        TAG_NUMBER,
        TAG_STRING,
        TAG_FUNCTION,
        TAG_TABLE,
        TAG_THREAD,
        TAG_BUFFER,
        TAG_USERDATA,
        TAG_ANY,
        TAG_UNKNOWN,
    )
}


class Table:
    """Base for host objects that report the `table` tag."""

    def to_table(self) -> list:
        raise NotImplementedError


def parse_tag(tag: str | Tag) -> Tag:
    """Resolve a tag name (or pass a Tag through)."""
    if isinstance(tag, Tag):
        if tag.kind not in TAGS:
            raise UnknownTag(f"unknown element type {tag.kind!r}")
        return tag
    if not isinstance(tag, str):
        raise UnknownTag(f"element type must be a tag name, got {type(tag).__name__}")
    found = TAGS.get(tag)
    if found is None:
        raise UnknownTag(f"unknown element type {tag!r}")
    return found


def type_of(value: object) -> Tag:
    """Runtime tag of a host value."""
    if value is None:
        return TAG_NIL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return TAG_BOOLEAN
    if isinstance(value, (int, float)):
        return TAG_NUMBER
    if isinstance(value, str):
        return TAG_STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return TAG_BUFFER
    if isinstance(value, (list, tuple, dict, Table)):
        return TAG_TABLE
    if (
        inspect.isgenerator(value)
        or inspect.iscoroutine(value)
        or inspect.isasyncgen(value)
    ):
        return TAG_THREAD
    if callable(value) and not isinstance(value, type):
        return TAG_FUNCTION
    return TAG_USERDATA


def assert_valid(elem_type: Tag, value: object) -> None:
    if elem_type.is_wildcard:
        return
    actual = type_of(value)
    if actual != elem_type:
        raise TypeMismatch(elem_type.display(), actual.display())


def values_equal(a: object, b: object) -> bool:
    # Values of different tags never compare equal (True != 1).
    if a is b:
        return True
    if type_of(a) != type_of(b):
        return False
    return bool(a == b)
