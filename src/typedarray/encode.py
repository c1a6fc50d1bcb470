"""String conversion of arrays through a structured-data encoder."""

from __future__ import annotations

import json
from typing import Callable

from .tags import Table

Encoder = Callable[[object], str]


def default_encoder(value: object) -> str:
    return json.dumps(value)


def flatten(value: object, _active: set[int] | None = None) -> object:
    """Turn nested arrays into plain lists of encodable values.

    Scalars the encoder understands pass through; anything else is
    replaced by its `str()`. A container that holds itself raises
    `ValueError`.
    """
    if not isinstance(value, (Table, list, tuple, dict)):
        if value is None or isinstance(value, (bool, int, float, str)):
            return value
        return str(value)
    if _active is None:
        _active = set()
    if id(value) in _active:
        raise ValueError("cannot convert a self-referencing array to text")
    _active.add(id(value))
    try:
        if isinstance(value, dict):
            return {str(k): flatten(v, _active) for k, v in value.items()}
        items = value.to_table() if isinstance(value, Table) else value
        return [flatten(v, _active) for v in items]
    finally:
        _active.discard(id(value))


def encode(array: Table, encoder: Encoder | None = None) -> str:
    if encoder is None:
        encoder = default_encoder
    return encoder(flatten(array))
