"""ajdcal public API.

Keep this surface small: users should mostly interact with AJD and the names re-exported here.
"""

from .ajd import AJD, EPOCH_JD
from .core.errors import AJDError, HostRangeError, InvalidFieldError, ReformGapError, UnderflowError
from .core.offsets import DEFAULT_OFFSET, JST, UTC, FixedOffset, OffsetResolver, parse_offset
from .core.rules import (
    GREGORIAN_CUTOVER,
    is_gregorian,
    is_leap_year,
    is_reform_gap,
    last_day_of_month,
)
from .core.time import civil_to_jd, jd_to_civil
from .core.types import CivilDateTime, Day

__all__ = [
    "AJD",
    "EPOCH_JD",
    "AJDError",
    "HostRangeError",
    "InvalidFieldError",
    "ReformGapError",
    "UnderflowError",
    "DEFAULT_OFFSET",
    "JST",
    "UTC",
    "FixedOffset",
    "OffsetResolver",
    "parse_offset",
    "GREGORIAN_CUTOVER",
    "is_gregorian",
    "is_leap_year",
    "is_reform_gap",
    "last_day_of_month",
    "civil_to_jd",
    "jd_to_civil",
    "CivilDateTime",
    "Day",
]
