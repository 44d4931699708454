from __future__ import annotations
from decimal import Decimal

from .arith import D, HALF, J86400, Number, idiv
from .errors import InvalidFieldError, ReformGapError, UnderflowError
from .rules import (
    GREGORIAN_START_JD,
    astronomical_year,
    is_gregorian,
    is_reform_gap,
    last_day_of_month,
)
from .types import CivilDateTime

# Julian -> civil decomposition constants (Meeus, Astronomical Algorithms ch. 7).
_J122_1 = Decimal("122.1")
_J365_25 = Decimal("365.25")
_J30_6001 = Decimal("30.6001")
_J30_6 = Decimal("30.6")
_ALPHA_BASE = Decimal("1867216.25")
_ALPHA_CENTURY = Decimal("36524.25")


def validate_civil(c: CivilDateTime) -> None:
    """Raise on the first invalid field, checked in calendar order."""
    for name in ("year", "month", "day", "hour", "minute", "second"):
        v = getattr(c, name)
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidFieldError(f"{name} must be an integer, got {v!r}")
    if c.year == 0:
        raise InvalidFieldError("year 0 does not exist (1 BC is -1)")
    if c.month < 1 or c.month > 12:
        raise InvalidFieldError(f"month out of range: {c.month}")
    if c.day < 1 or c.day > last_day_of_month(c.year, c.month):
        raise InvalidFieldError(f"day out of range: {c.year}/{c.month}/{c.day}")
    if c.hour < 0 or c.hour > 23:
        raise InvalidFieldError(f"hour out of range: {c.hour}")
    if c.minute < 0 or c.minute > 59:
        raise InvalidFieldError(f"minute out of range: {c.minute}")
    if c.second < 0 or c.second > 59:
        raise InvalidFieldError(f"second out of range: {c.second}")
    if is_reform_gap(c.year, c.month, c.day):
        raise ReformGapError(f"{c.year}/{c.month}/{c.day} falls in the Gregorian reform gap")


def civil_to_jd(c: CivilDateTime, offset: Number = 0) -> Decimal:
    """
    Civil fields at the given UTC offset (days) -> Julian Date.

    Dates before 1582-10-15 are read as proleptic Julian, later ones as Gregorian.
    """
    validate_civil(c)
    gregorian = is_gregorian(c.year, c.month, c.day)

    y = astronomical_year(c.year)
    bc = y <= 0
    m = c.month
    if m <= 2:
        y -= 1
        m += 12

    # JD changes at noon
    if c.hour < 12:
        n = 0
        frac = HALF
    else:
        n = 1
        frac = -HALF
    frac = D.add(frac, D.div(D.from_int(c.seconds_of_day()), J86400))

    n += idiv(y - 3, 4) if bc else idiv(y, 4)
    if gregorian:
        n += 2 - idiv(y, 100) + idiv(y, 400)
    n += 1720994 + y * 365 + (m + 1) * 30 + idiv((m + 1) * 3, 5) + c.day

    jd = D.sub(D.add(frac, D.from_int(n)), D.coerce(offset))
    if jd < 0:
        raise UnderflowError(f"{c} resolves before JD 0")
    return jd


def jd_to_civil(jd: Decimal, offset: Number = 0) -> CivilDateTime:
    """Julian Date -> civil fields at the given UTC offset (days)."""
    shifted = D.add(D.coerce(jd), D.coerce(offset))
    if shifted < 0:
        raise UnderflowError(f"JD {D.canonical(shifted)} (offset applied) is before JD 0")

    # move the day boundary from noon to midnight
    z = D.trunc(shifted)
    frac = D.sub(shifted, D.from_int(z))
    if frac >= HALF:
        z += 1
        frac = D.sub(frac, HALF)
    else:
        frac = D.add(frac, HALF)

    if shifted >= GREGORIAN_START_JD:
        alpha = D.trunc(D.div(D.sub(D.from_int(z), _ALPHA_BASE), _ALPHA_CENTURY))
        z = z + 1 + alpha - alpha // 4
    b = z + 1524

    c = D.trunc(D.div(D.sub(D.from_int(b), _J122_1), _J365_25))
    k = c * 365 + c // 4
    e = D.trunc(D.div(D.from_int(b - k), _J30_6001))

    year = c - 4716
    month = e - 1
    if month > 12:
        month -= 12
        year += 1
    if year <= 0:
        year -= 1
    day = b - k - D.trunc(D.mul(_J30_6, D.from_int(e)))

    s = D.round_half_away(D.mul(frac, J86400))
    hour = s // 3600
    if hour >= 24:
        hour -= 24
        day += 1
        # 1582-10-04 24:00 is 1582-10-15 00:00
        if is_reform_gap(year, month, day):
            day = 15
        elif day > last_day_of_month(year, month):
            day = 1
            month += 1
            if month > 12:
                month = 1
                year += 1
                if year == 0:
                    year = 1
    minute = (s % 3600) // 60
    second = s % 60
    return CivilDateTime(year, month, day, hour, minute, second)


def day_fraction(n: Number, units_per_day: int) -> Decimal:
    """n units (seconds, minutes, hours) expressed in days with a single rounding step."""
    return D.div(D.coerce(n), D.from_int(units_per_day))
