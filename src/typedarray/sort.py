"""In-place partition-exchange sort (Lomuto partitioning)."""

from __future__ import annotations

from typing import Callable

Comparator = Callable[[object, object], bool]


def less_than(a: object, b: object) -> bool:
    return a < b  # type: ignore[operator]


def partition(items: list, comparator: Comparator, lo: int, hi: int) -> int:
    """Partition items[lo..hi] around items[hi]; returns the pivot's final slot."""
    pivot = items[hi]
    i = lo - 1
    for j in range(lo, hi):
        if comparator(items[j], pivot):
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[hi] = items[hi], items[i + 1]
    return i + 1


def quicksort(
    items: list,
    comparator: Comparator = less_than,
    lo: int = 0,
    hi: int | None = None,
) -> None:
    """Sort items[lo..hi] (inclusive, 0-based) in place. Not stable."""
    if hi is None:
        hi = len(items) - 1
    stack: list[tuple[int, int]] = [(lo, hi)]
    while stack:
        lo, hi = stack.pop()
        while lo < hi:
            p = partition(items, comparator, lo, hi)
            # defer the larger side so the stack stays O(log n)
            if p - lo < hi - p:
                stack.append((p + 1, hi))
                hi = p - 1
            else:
                stack.append((lo, p - 1))
                lo = p + 1
