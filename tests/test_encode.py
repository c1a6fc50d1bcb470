"""Tests for string conversion."""

import json

import pytest

from typedarray import Array, flatten, new


class _Point:
    def __str__(self) -> str:
        return "Point(1, 2)"


def test_flatten_nested_arrays() -> None:
    inner = Array("number", [1, 2])
    outer = Array("any", [inner, new("string", ["x"]), [3, (4,)]])
    assert flatten(outer) == [[1, 2], ["x"], [3, [4]]]


def test_flatten_falls_back_to_text() -> None:
    arr = Array("any", [_Point(), b"hi", {"k": _Point(), 1: 2}])
    assert flatten(arr) == ["Point(1, 2)", "b'hi'", {"k": "Point(1, 2)", "1": 2}]


def test_default_encoder_is_json() -> None:
    arr = Array("any", [1.5, True, None, "q"])
    assert json.loads(arr.to_string()) == [1.5, True, None, "q"]


def test_custom_encoder_receives_flattened_structure() -> None:
    received = []

    def encoder(value: object) -> str:
        received.append(value)
        return "ok"

    arr = Array("any", [Array("number", [1])])
    assert arr.to_string(encoder) == "ok"
    assert received == [[[1]]]


def test_self_reference_is_rejected() -> None:
    arr = Array("any")
    arr.push(arr)
    with pytest.raises(ValueError, match="self-referencing"):
        arr.to_string()
    proxy = new("any", [1])
    proxy.push(proxy)
    with pytest.raises(ValueError):
        str(proxy)


def test_shared_inner_array_is_not_a_cycle() -> None:
    inner = Array("number", [1])
    outer = Array("any", [inner, inner])
    assert outer.to_string() == "[[1], [1]]"
