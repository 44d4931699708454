from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, Tuple, runtime_checkable

@dataclass(frozen=True)
class CivilDateTime:
    """Civil calendar fields. year is never 0; negative years are BC (-1 precedes 1)."""
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def date_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def time_tuple(self) -> Tuple[int, int, int]:
        return (self.hour, self.minute, self.second)

    def seconds_of_day(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    def at_midnight(self) -> "CivilDateTime":
        return CivilDateTime(self.year, self.month, self.day)

    def __str__(self) -> str:
        return (
            f"{self.year}/{self.month:02d}/{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

@runtime_checkable
class Day(Protocol):
    """Anything that denotes a single instant as a Julian Date plus civil fields."""
    @property
    def jd(self) -> Decimal: ...
    @property
    def year(self) -> int: ...
    @property
    def month(self) -> int: ...
    @property
    def day(self) -> int: ...
    @property
    def hour(self) -> int: ...
    @property
    def minute(self) -> int: ...
    @property
    def second(self) -> int: ...
