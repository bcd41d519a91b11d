"""Find partially-known dates (year/month/day, any of them possibly unknown) in free text.

Digit runs joined by date punctuation are grouped into candidates, then each
candidate's year/month/day roles are inferred from magnitude alone.
"""

from .find import find_dates, find_last_date
from .ordering import compare_dates, compare_optional
from .types import (
    DateError,
    DateResult,
    InvalidDateFormat,
    NoDatesFound,
    PartialDate,
    UndecidedDate,
    is_error,
    unwrap,
)
