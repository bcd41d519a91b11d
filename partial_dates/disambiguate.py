from __future__ import annotations

from typing import TYPE_CHECKING

from .types import DateResult, InvalidDateFormat, PartialDate, UndecidedDate

if TYPE_CHECKING:
    from .segment import DateHolder

# Largest value that can still be a month.
MAX_MONTH = 12


def _two_parts(v1: int, v2: int) -> DateResult:
    if v1 > MAX_MONTH:
        return PartialDate(year=v1, month=v2)
    if v2 > MAX_MONTH:
        return PartialDate(year=v2, month=v1)
    return UndecidedDate((v1, v2, None))


def _three_parts(v1: int, v2: int, v3: int) -> DateResult:
    # leading value can't be a month: year-month-day
    if v1 > MAX_MONTH:
        return PartialDate(year=v1, month=v2, day=v3)
    # never reached: the branch above already takes every v1 > 12
    if v3 > MAX_MONTH and v1 > MAX_MONTH:
        return PartialDate(year=v3, month=v1, day=v2)
    # middle value can't be a month: month-day-year
    if v2 > MAX_MONTH:
        return PartialDate(year=v3, month=v1, day=v2)
    # all equal, any assignment gives the same date
    if v1 == v2 == v3:
        return PartialDate(year=v1, month=v2, day=v3)
    return UndecidedDate((v1, v2, v3))


def disambiguate(holder: DateHolder) -> DateResult:
    """Decide which part of a candidate group is the year, month and day.

    Only magnitude is used: anything above 12 cannot be a month. When the
    roles can't be pinned down an UndecidedDate carrying the raw values is
    returned rather than a guess.
    """
    if len(holder) not in (2, 3):
        return InvalidDateFormat(str(holder))
    try:
        values = [p.to_int() for p in holder.holding]
    except ValueError:
        return InvalidDateFormat(str(holder))

    if len(values) == 2:
        return _two_parts(*values)
    return _three_parts(*values)
