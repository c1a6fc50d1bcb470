"""Errors raised by typed arrays."""

from __future__ import annotations


class ArrayError(Exception):
    """Base error for typed array operations."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class TypeMismatch(ArrayError):
    """Element's runtime tag disagrees with the array's declared tag."""

    def __init__(self, expected: str, actual: str):
        super().__init__(f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class UnknownTag(ArrayError):
    """Tag name outside the closed set."""


class InvalidPreset(ArrayError):
    """Constructor preset is not sequence-shaped."""


class IndexOutOfRange(ArrayError):
    def __init__(self, index: int, length: int, op: str):
        super().__init__(f"{op}: index {index} out of range for length {length}")
        self.index = index
        self.length = length


class ValueNotFound(ArrayError):
    def __init__(self, value: object):
        super().__init__(f"value not found: {value!r}")
        self.value = value


class EmptyReduce(ArrayError):
    """reduce() of an empty array with no initial value."""

    def __init__(self) -> None:
        super().__init__("reduce of empty array with no initial value")
