from __future__ import annotations
from decimal import Decimal
from typing import Tuple

from .errors import InvalidFieldError

# First day counted with Gregorian rules; the ten days before it never existed.
GREGORIAN_CUTOVER: Tuple[int, int, int] = (1582, 10, 15)
# JD of 1582-10-15 00:00 UTC.
GREGORIAN_START_JD = Decimal("2299160.5")

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def astronomical_year(year: int) -> int:
    """Civil year (no year zero) -> astronomical year: -1 -> 0, -2 -> -1."""
    return year + 1 if year < 0 else year


def is_leap_year(year: int) -> bool:
    """
    Century rule, applied to both the Julian and Gregorian eras.

    The test runs on the astronomical year, so 1 BC (-1) is a leap year.
    """
    y = astronomical_year(year)
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def last_day_of_month(year: int, month: int) -> int:
    if month < 1 or month > 12:
        raise InvalidFieldError(f"month out of range: {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def is_reform_gap(year: int, month: int, day: int) -> bool:
    return year == 1582 and month == 10 and 4 < day < 15


def is_gregorian(year: int, month: int, day: int) -> bool:
    return (year, month, day) >= GREGORIAN_CUTOVER
