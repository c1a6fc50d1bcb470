"""Per-array behavior flags."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Flags inherited by every array derived from the one carrying them.

    The defaults keep the historical behavior:
    `truncate(n)` keeps n - 1 elements and `every` is false on an empty array.
    """

    strict_truncate: bool = False
    strict_every: bool = False
    deferred_writes: bool = True

    @classmethod
    def strict(cls, deferred_writes: bool = True) -> Settings:
        return cls(strict_truncate=True, strict_every=True, deferred_writes=deferred_writes)


DEFAULT_SETTINGS = Settings()
