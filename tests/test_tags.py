"""Tests for element type tags and the runtime validator."""

import pytest

from typedarray import (
    Array,
    TAG_ANY,
    TAG_BOOLEAN,
    TAG_BUFFER,
    TAG_FUNCTION,
    TAG_NIL,
    TAG_NUMBER,
    TAG_STRING,
    TAG_TABLE,
    TAG_THREAD,
    TAG_USERDATA,
    TypeMismatch,
    UnknownTag,
    assert_valid,
    new,
    parse_tag,
    type_of,
)
from typedarray.tags import values_equal


def _gen():
    yield 1


class _Opaque:
    pass


def test_type_of_primitives() -> None:
    assert type_of(None) == TAG_NIL
    assert type_of(True) == TAG_BOOLEAN
    assert type_of(3) == TAG_NUMBER
    assert type_of(2.5) == TAG_NUMBER
    assert type_of("x") == TAG_STRING
    assert type_of(b"x") == TAG_BUFFER
    assert type_of(bytearray(2)) == TAG_BUFFER


def test_type_of_tables() -> None:
    assert type_of([]) == TAG_TABLE
    assert type_of((1, 2)) == TAG_TABLE
    assert type_of({"a": 1}) == TAG_TABLE
    assert type_of(Array()) == TAG_TABLE
    assert type_of(new()) == TAG_TABLE


def test_type_of_callables_and_opaque() -> None:
    assert type_of(len) == TAG_FUNCTION
    assert type_of(lambda: 0) == TAG_FUNCTION
    assert type_of(_gen()) == TAG_THREAD
    # classes and plain objects are opaque engine values
    assert type_of(_Opaque) == TAG_USERDATA
    assert type_of(_Opaque()) == TAG_USERDATA


def test_parse_tag() -> None:
    assert parse_tag("number") is TAG_NUMBER
    assert parse_tag(TAG_STRING) is TAG_STRING
    with pytest.raises(UnknownTag):
        parse_tag("integer")
    with pytest.raises(UnknownTag):
        parse_tag(5)  # type: ignore[arg-type]


def test_assert_valid_reports_both_tags() -> None:
    with pytest.raises(TypeMismatch) as info:
        assert_valid(TAG_NUMBER, "7")
    assert info.value.expected == "number"
    assert info.value.actual == "string"
    assert "expected number, got string" in str(info.value)


def test_wildcards_accept_anything() -> None:
    for tag in ("any", "unknown"):
        t = parse_tag(tag)
        for v in (None, 1, "s", [], _Opaque()):
            assert_valid(t, v)
    assert TAG_ANY.is_wildcard
    assert not TAG_NUMBER.is_wildcard


def test_bool_is_not_number() -> None:
    with pytest.raises(TypeMismatch):
        assert_valid(TAG_NUMBER, True)


def test_values_equal() -> None:
    assert values_equal(1, 1.0)
    assert values_equal("a", "a")
    assert not values_equal(1, True)
    assert not values_equal(0, None)
    o = _Opaque()
    assert values_equal(o, o)
    assert not values_equal(o, _Opaque())
