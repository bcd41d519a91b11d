from __future__ import annotations

from typing import Protocol, Sequence


class _HasDateFields(Protocol):
    year: int | None
    month: int | None
    day: int | None


def compare_optional(a: Sequence[int | None], b: Sequence[int | None]) -> int:
    """Lexicographic comparison of two sequences of optional values.

    Returns -1, 0 or 1. At each position an unknown value sorts before a known
    one; two known values decide by magnitude; equal or both-unknown positions
    move on to the next field.
    """
    for x, y in zip(a, b):
        if x is None and y is not None:
            return -1
        if x is not None and y is None:
            return 1
        if x is not None and y is not None and x != y:
            return -1 if x < y else 1
    return 0


def compare_dates(a: _HasDateFields, b: _HasDateFields) -> int:
    return compare_optional((a.year, a.month, a.day), (b.year, b.month, b.day))
