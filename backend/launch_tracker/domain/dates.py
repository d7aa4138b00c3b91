"""Calendar helpers — one way to build dates, fixed English labels.

Every date in the system is built through ``make_date`` so that an ISO
string and a year/month/day triple naming the same day always compare
equal and land in the same timeline bucket.
"""

import re
from datetime import date, datetime, time, timedelta, timezone

from launch_tracker.domain.exceptions import InvalidDateError

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def make_date(year: int, month: int, day: int) -> date:
    """Build a date from a 1-indexed month.

    A day past the end of the month rolls over into the next one
    (2025-02-30 becomes 2025-03-02).
    """
    return date(year, month, 1) + timedelta(days=day - 1)


def parse_iso_date(value: str, field: str = "date") -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a date."""
    match = _ISO_DATE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidDateError(field, value)

    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        raise InvalidDateError(field, value) from None
    return make_date(year, month, day)


def epoch_millis(value: date) -> int:
    """Milliseconds since the Unix epoch at UTC midnight of *value*."""
    midnight = datetime.combine(value, time.min, tzinfo=timezone.utc)
    return int(midnight.timestamp() * 1000)


def short_label(value: date) -> str:
    """``Mar 10``"""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}"


def long_label(value: date) -> str:
    """``March 10, 2025``"""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"
