"""
ajdcal.core.offsets
-------------------
UTC offset strategies. Civil fields are always resolved relative to an offset
(a Decimal fraction of a day, +9h = 0.375). A value delegates to a resolver
instead of overriding conversion methods, so swapping offset semantics means
rebuilding the value from its raw Julian Date under another resolver.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo
from decimal import Decimal
from typing import Optional, Protocol

from .arith import D, MINUTES_PER_DAY, SECONDS_PER_DAY
from .errors import InvalidFieldError
from .types import CivilDateTime


class OffsetResolver(Protocol):
    def for_jd(self, jd: Decimal) -> Decimal:
        """Offset (days) to add to a Julian Date when decoding civil fields."""
        ...

    def for_civil(self, civil: CivilDateTime) -> Decimal:
        """Offset (days) to subtract when encoding local civil fields."""
        ...

    def tzinfo(self) -> tzinfo:
        """Host timezone object used by the datetime interop accessors."""
        ...


@dataclass(frozen=True)
class FixedOffset:
    days: Decimal
    name: Optional[str] = None

    def __post_init__(self) -> None:
        d = D.coerce(self.days)
        if abs(d) >= 1:
            raise InvalidFieldError(f"offset must be less than one day: {self.days!r}")
        object.__setattr__(self, "days", d)

    @classmethod
    def of_hours(cls, hours: int, minutes: int = 0, *, name: Optional[str] = None) -> "FixedOffset":
        """+05:30 is of_hours(5, 30); -03:30 is of_hours(-3, -30)."""
        if abs(minutes) > 59:
            raise InvalidFieldError(f"offset minutes out of range: {minutes}")
        total = hours * 60 + minutes
        return cls(D.div(D.from_int(total), D.from_int(MINUTES_PER_DAY)), name)

    def for_jd(self, jd: Decimal) -> Decimal:
        return self.days

    def for_civil(self, civil: CivilDateTime) -> Decimal:
        return self.days

    def total_seconds(self) -> int:
        return D.round_half_away(D.mul(self.days, D.from_int(SECONDS_PER_DAY)))

    def tzinfo(self) -> tzinfo:
        delta = timedelta(seconds=self.total_seconds())
        return timezone(delta, self.name) if self.name else timezone(delta)

    def label(self) -> str:
        if self.name:
            return self.name
        secs = self.total_seconds()
        sign = "-" if secs < 0 else "+"
        mins = abs(secs) // 60
        return f"{sign}{mins // 60:02d}:{mins % 60:02d}"


UTC = FixedOffset(Decimal(0), "UTC")
JST = FixedOffset(Decimal("0.375"), "JST")
DEFAULT_OFFSET = JST

_NAMED = {"Z": UTC, "UTC": UTC, "GMT": UTC, "JST": JST}
_OFFSET_RE = re.compile(r"^([+-])(\d{1,2}):?(\d{2})?$")


def parse_offset(text: str) -> FixedOffset:
    """Parse 'Z', 'UTC', 'JST', '+09:00', '-0530' or '+9'."""
    s = text.strip()
    if s.upper() in _NAMED:
        return _NAMED[s.upper()]
    m = _OFFSET_RE.match(s)
    if not m:
        raise InvalidFieldError(f"cannot parse UTC offset: {text!r}")
    sign = -1 if m.group(1) == "-" else 1
    hours = int(m.group(2))
    minutes = int(m.group(3) or 0)
    if hours > 23 or minutes > 59:
        raise InvalidFieldError(f"UTC offset out of range: {text!r}")
    return FixedOffset.of_hours(sign * hours, sign * minutes)
