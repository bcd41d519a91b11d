from __future__ import annotations

from .segment import segment
from .types import DateResult, NoDatesFound


def find_dates(text: str) -> list[DateResult]:
    """Return one result per candidate date in text, in order of appearance.

    Failures are kept in place as DateError values.
    """
    return segment(text).as_dates()


def find_last_date(text: str) -> DateResult:
    dates = find_dates(text)
    if not dates:
        return NoDatesFound(text)
    return dates[-1]
