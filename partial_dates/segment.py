from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .disambiguate import disambiguate
from .types import DateResult

SEPARATORS = frozenset("-/_ .")


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS


def is_digit(ch: str) -> bool:
    # str.isdigit() also accepts superscripts and other scripts' digits
    return "0" <= ch <= "9"


@dataclass
class Part:
    """One run of digits, kept exactly as written."""

    digits: list[str] = field(default_factory=list)

    def push(self, ch: str) -> None:
        self.digits.append(ch)

    def clear(self) -> None:
        self.digits.clear()

    def is_empty(self) -> bool:
        return not self.digits

    def to_int(self) -> int:
        """Parse as an unsigned 16-bit value.

        Only a '0' at index 0 is dropped: "05" -> 5, "005" -> 5 (via "05"),
        "0" -> ValueError (nothing left to parse).
        """
        s = "".join(ch for i, ch in enumerate(self.digits) if not (i == 0 and ch == "0"))
        n = int(s, 10)
        if n > 0xFFFF:
            raise ValueError(f"number too large to fit in target type: {s}")
        return n

    def __str__(self) -> str:
        return "".join(self.digits)


@dataclass
class DateHolder:
    """A candidate date: the digit runs of one digits-and-separators window."""

    holding: list[Part] = field(default_factory=list)

    def add_date_part(self, part: Part) -> None:
        self.holding.append(Part(list(part.digits)))
        part.clear()

    def clear(self) -> None:
        self.holding.clear()

    def is_empty(self) -> bool:
        return not self.holding

    def __len__(self) -> int:
        return len(self.holding)

    def __str__(self) -> str:
        return " ".join(str(p) for p in self.holding)

    def as_date(self) -> DateResult:
        return disambiguate(self)


@dataclass
class DateHolders:
    """Finalized candidate groups, in the order they appear in the text."""

    holders: list[DateHolder] = field(default_factory=list)

    def push(self, holder: DateHolder) -> None:
        self.holders.append(DateHolder(list(holder.holding)))
        holder.clear()

    def __len__(self) -> int:
        return len(self.holders)

    def __iter__(self) -> Iterator[DateHolder]:
        return iter(self.holders)

    def as_dates(self) -> list[DateResult]:
        return [h.as_date() for h in self.holders]


def segment(text: str) -> DateHolders:
    """Split text into candidate date groups in one pass.

    Digits and separators extend the current group. Any other character ends
    it: groups of two or more parts are kept, shorter ones dropped. At the end
    of the text a pending group is kept whatever its length.
    """
    holders = DateHolders()
    holder = DateHolder()
    part = Part()

    for ch in text:
        if is_digit(ch):
            part.push(ch)
        elif is_separator(ch):
            if not part.is_empty():
                holder.add_date_part(part)
        elif len(holder) >= 2:
            holders.push(holder)
            part.clear()
        elif not holder.is_empty():
            holder.clear()
            part.clear()

    if not holder.is_empty():
        if not part.is_empty():
            holder.add_date_part(part)
        holders.push(holder)

    return holders
