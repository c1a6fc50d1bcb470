"""Runtime-typed dynamic arrays — public API."""

from __future__ import annotations

from typing import Sequence

from .array import Array
from .encode import default_encoder, flatten
from .errors import (
    ArrayError,
    EmptyReduce,
    IndexOutOfRange,
    InvalidPreset,
    TypeMismatch,
    UnknownTag,
    ValueNotFound,
)
from .facade import ArrayProxy
from .settings import DEFAULT_SETTINGS, Settings
from .tags import (
    TAG_ANY,
    TAG_BOOLEAN,
    TAG_BUFFER,
    TAG_FUNCTION,
    TAG_NIL,
    TAG_NUMBER,
    TAG_STRING,
    TAG_TABLE,
    TAG_THREAD,
    TAG_UNKNOWN,
    TAG_USERDATA,
    Tag,
    assert_valid,
    parse_tag,
    type_of,
)


def new(
    elem_type: str | Tag = TAG_ANY,
    preset: Sequence | None = None,
    *,
    settings: Settings | None = None,
) -> ArrayProxy:
    """Build an array and return its index-addressable facade."""
    return ArrayProxy(Array(elem_type, preset, settings=settings))
