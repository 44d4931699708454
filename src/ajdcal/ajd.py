"""
ajdcal.ajd
----------
The AJD value: one Julian Date plus the civil fields it denotes at a UTC offset.

Values are immutable. The civil snapshot and the hash are memoized with
cached_property; both are pure functions of (jd, offset), so a race on first
access can only compute the same result twice.
"""

from __future__ import annotations

import operator
import time
from dataclasses import dataclass
from datetime import date, datetime, time as dtime, timedelta, timezone, tzinfo
from decimal import ROUND_FLOOR, Decimal
from functools import cached_property, total_ordering
from typing import Any, Callable, Optional

from .core.arith import D, HOURS_PER_DAY, MINUTES_PER_DAY, SECONDS_PER_DAY, Number, idiv
from .core.errors import HostRangeError, UnderflowError
from .core.offsets import DEFAULT_OFFSET, OffsetResolver
from .core.time import civil_to_jd, day_fraction, jd_to_civil
from .core.types import CivilDateTime, Day

# 1970-01-01 00:00:00 UTC
EPOCH_JD = Decimal("2440587.5")
_MS_PER_DAY = Decimal(SECONDS_PER_DAY * 1000)
_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@total_ordering
@dataclass(frozen=True, eq=False)
class AJD:
    jd: Decimal
    offset: OffsetResolver = DEFAULT_OFFSET

    def __post_init__(self) -> None:
        jd = D.coerce(self.jd)
        if jd < 0:
            raise UnderflowError(f"JD {D.canonical(jd)} is before JD 0")
        if D.add(jd, self.offset.for_jd(jd)) < 0:
            raise UnderflowError(f"JD {D.canonical(jd)} is before JD 0 at this offset")
        object.__setattr__(self, "jd", jd)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def from_jd(cls, value: Number, offset: OffsetResolver = DEFAULT_OFFSET) -> "AJD":
        return cls(D.coerce(value), offset)

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        offset: OffsetResolver = DEFAULT_OFFSET,
    ) -> "AJD":
        """Civil fields read at `offset`. Year 0 does not exist; 1 BC is -1."""
        civil = CivilDateTime(year, month, day, hour, minute, second)
        return cls(civil_to_jd(civil, offset.for_civil(civil)), offset)

    @classmethod
    def of_date(cls, year: int, month: int, day: int, *, offset: OffsetResolver = DEFAULT_OFFSET) -> "AJD":
        return cls.of(year, month, day, offset=offset)

    @classmethod
    def from_civil(cls, civil: CivilDateTime, offset: OffsetResolver = DEFAULT_OFFSET) -> "AJD":
        return cls(civil_to_jd(civil, offset.for_civil(civil)), offset)

    @classmethod
    def from_day(cls, other: Day, offset: OffsetResolver = DEFAULT_OFFSET) -> "AJD":
        return cls(other.jd, offset)

    @classmethod
    def from_timestamp(cls, seconds: Number, offset: OffsetResolver = DEFAULT_OFFSET) -> "AJD":
        """
        POSIX seconds -> AJD. Sub-second digits are floored away.

        The instant is split into civil fields at the offset first and then
        encoded, so the result equals AJD.of(...) for the same wall-clock fields.
        """
        whole = D.coerce(seconds).to_integral_value(rounding=ROUND_FLOOR)
        utc_days, sod = divmod(int(whole), SECONDS_PER_DAY)
        utc_midnight = D.add(EPOCH_JD, D.from_int(utc_days))
        shift = offset.for_jd(D.add(utc_midnight, day_fraction(sod, SECONDS_PER_DAY)))
        shift_secs = D.round_half_away(D.mul(shift, D.from_int(SECONDS_PER_DAY)))

        local_days, local_sod = divmod(int(whole) + shift_secs, SECONDS_PER_DAY)
        d = jd_to_civil(D.add(EPOCH_JD, D.from_int(local_days)))
        civil = CivilDateTime(
            d.year, d.month, d.day,
            local_sod // 3600, (local_sod % 3600) // 60, local_sod % 60,
        )
        return cls.from_civil(civil, offset)

    @classmethod
    def now(
        cls,
        offset: OffsetResolver = DEFAULT_OFFSET,
        *,
        clock: Callable[[], float] = time.time,
    ) -> "AJD":
        return cls.from_timestamp(clock(), offset)

    def with_offset(self, offset: OffsetResolver) -> "AJD":
        """Same instant, civil fields resolved under another offset strategy."""
        if offset == self.offset:
            return self
        return AJD(self.jd, offset)

    # ---------------------------------------------------------
    # Civil accessors
    # ---------------------------------------------------------

    @cached_property
    def civil(self) -> CivilDateTime:
        return jd_to_civil(self.jd, self.offset.for_jd(self.jd))

    @property
    def year(self) -> int:
        return self.civil.year

    @property
    def month(self) -> int:
        return self.civil.month

    @property
    def day(self) -> int:
        return self.civil.day

    @property
    def hour(self) -> int:
        return self.civil.hour

    @property
    def minute(self) -> int:
        return self.civil.minute

    @property
    def second(self) -> int:
        return self.civil.second

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def _shift(self, delta: Decimal) -> "AJD":
        if delta == 0:
            return self
        return AJD(D.add(self.jd, delta), self.offset)

    def add_seconds(self, n: int) -> "AJD":
        return self._shift(day_fraction(operator.index(n), SECONDS_PER_DAY))

    def add_minutes(self, n: int) -> "AJD":
        return self._shift(day_fraction(operator.index(n), MINUTES_PER_DAY))

    def add_hours(self, n: int) -> "AJD":
        return self._shift(day_fraction(operator.index(n), HOURS_PER_DAY))

    def add_days(self, n: Number) -> "AJD":
        """n may be fractional (0.5 is twelve hours)."""
        return self._shift(D.coerce(n))

    def truncate_to_midnight(self) -> "AJD":
        midnight = AJD.from_civil(self.civil.at_midnight(), self.offset)
        if midnight.jd == self.jd:
            return self
        return midnight

    # ---------------------------------------------------------
    # Ordering / equality
    # ---------------------------------------------------------

    def compare(self, other: Day) -> int:
        o = other.jd
        if self.jd < o:
            return -1
        if self.jd > o:
            return 1
        return 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.compare(other) < 0

    @cached_property
    def _hash(self) -> int:
        return hash(D.canonical(self.jd))

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        return f"{self.civil}[{D.canonical(self.jd)}]"

    # ---------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------

    def epoch_millis(self) -> int:
        """Milliseconds since 1970-01-01 00:00:00 UTC, at whole-second resolution."""
        ms = D.round_half_away(D.mul(D.sub(self.jd, EPOCH_JD), _MS_PER_DAY))
        return idiv(ms, 1000) * 1000

    def to_datetime(self, tz: Optional[tzinfo] = None) -> datetime:
        """
        Aware datetime for this instant (in the offset's zone unless `tz` is given).

        datetime is proleptic Gregorian: before 1582-10-15 its fields differ
        from the Julian-calendar civil fields of this value. Instants outside
        datetime's years 1..9999 raise HostRangeError.
        """
        try:
            dt = _UNIX_EPOCH + timedelta(milliseconds=self.epoch_millis())
            return dt.astimezone(tz or self.offset.tzinfo())
        except OverflowError as e:
            raise HostRangeError(f"{self} is outside the datetime range") from e

    def to_date(self) -> date:
        """Civil date at midnight as a datetime.date; HostRangeError outside years 1..9999."""
        return self.truncate_to_midnight().to_datetime().date()

    def to_time(self) -> dtime:
        """Time of day, re-based onto 1970-01-01 at the same offset."""
        c = self.civil
        ref = AJD.of(1970, 1, 1, c.hour, c.minute, c.second, offset=self.offset)
        return ref.to_datetime().timetz()
