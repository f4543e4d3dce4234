"""
Production month helpers.

A production month is a zero-padded "YYYY-MM" token. Tokens sort
lexicographically in chronological order, so they can be compared as
plain strings once validated.
"""

import re
from datetime import date
from typing import Any, List

from exceptions import InvalidMonthError

MONTH_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})")

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_month(value: Any) -> date:
    """
    Parse a "YYYY-MM" token into the first day of that month.

    Raises:
        InvalidMonthError: Wrong length, non-numeric parts, or month outside 01-12
    """
    if not isinstance(value, str) or len(value) != 7:
        raise InvalidMonthError(value)

    match = MONTH_PATTERN.fullmatch(value)
    if not match:
        raise InvalidMonthError(value)

    year, month = int(match.group(1)), int(match.group(2))
    if year < 1 or not 1 <= month <= 12:
        raise InvalidMonthError(value)

    return date(year, month, 1)


def is_valid_month(value: Any) -> bool:
    """Check a month token without raising."""
    try:
        parse_month(value)
    except InvalidMonthError:
        return False
    return True


def format_month(value: date) -> str:
    """Format a date (any day) as its "YYYY-MM" token."""
    return f"{value.year:04d}-{value.month:02d}"


def get_current_month(today: date) -> str:
    """Month token containing `today`."""
    return format_month(today)


def _month_index(month: str) -> int:
    parsed = parse_month(month)
    return parsed.year * 12 + (parsed.month - 1)


def _from_index(index: int) -> str:
    year, month_zero = divmod(index, 12)
    return format_month(date(year, month_zero + 1, 1))


def shift_month(month: str, offset: int) -> str:
    """
    Move a month token by `offset` months (negative goes back).

    Handles year rollover: shift_month("2025-12", 1) == "2026-01".
    """
    return _from_index(_month_index(month) + offset)


def month_range(start: str, end: str) -> List[str]:
    """Inclusive ascending list of month tokens from start to end."""
    first, last = _month_index(start), _month_index(end)
    return [_from_index(i) for i in range(first, last + 1)]


def format_month_display(month: str) -> str:
    """Human label, e.g. "2026-02" -> "February 2026"."""
    parsed = parse_month(month)
    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.year}"


def get_month_name(month: str) -> str:
    """Month name only, e.g. "2025-06" -> "June"."""
    return MONTH_NAMES[parse_month(month).month - 1]


def get_year(month: str) -> int:
    """Year part of a month token."""
    return parse_month(month).year
