from __future__ import annotations

from dataclasses import dataclass

from .ordering import compare_dates


def _key(v: int | None) -> int:
    return -1 if v is None else v


@dataclass(frozen=True)
class PartialDate:
    """A calendar date where any of year/month/day may be unknown.

    No calendrical validation is done: month 12 day 31 and month 2 day 31 are
    both accepted as-is.
    """

    year: int | None = None
    month: int | None = None
    day: int | None = None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PartialDate):
            return NotImplemented
        return compare_dates(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PartialDate):
            return NotImplemented
        return compare_dates(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PartialDate):
            return NotImplemented
        return compare_dates(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PartialDate):
            return NotImplemented
        return compare_dates(self, other) >= 0

    @property
    def is_complete(self) -> bool:
        return self.year is not None and self.month is not None and self.day is not None

    def sort_key(self) -> tuple[int, int, int]:
        """Key consistent with the comparison operators (unknown -> -1)."""
        return (_key(self.year), _key(self.month), _key(self.day))


class DateError(ValueError):
    """Base class for every failure reported by the date finder.

    Instances are returned as values inside result lists; two errors are equal
    when they have the same class and payload.
    """

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NoDatesFound(DateError):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"No dates found from {self.text}"


class UndecidedDate(DateError):
    """Digits were well-formed but the year/month/day roles are ambiguous."""

    def __init__(self, values: tuple[int | None, int | None, int | None]) -> None:
        super().__init__(values)
        self.values = values

    def __str__(self) -> str:
        a, b, c = self.values
        return f"unable to determine date from values: {a} {b} {c}"


class InvalidDateFormat(DateError):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text

    def __str__(self) -> str:
        return f"Invalid date format from {self.text}"


DateResult = PartialDate | DateError


def is_error(result: DateResult) -> bool:
    return isinstance(result, DateError)


def unwrap(result: DateResult) -> PartialDate:
    """Return the date, or raise the error it carries."""
    if isinstance(result, DateError):
        raise result
    return result
