from __future__ import annotations
from dataclasses import dataclass
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from fractions import Fraction
from typing import Literal, Union

from .errors import InvalidFieldError

Number = Union[int, str, float, Decimal, Fraction]

# Julian Dates need 7 integer digits plus DIV_PLACES fractional digits;
# add/sub/mul stay exact well inside this precision.
PRECISION = 50
DIV_PLACES = 20

CTX = Context(
    prec=PRECISION,
    rounding=ROUND_HALF_UP,
    traps=[DivisionByZero, InvalidOperation, Overflow],
)
_QUANTUM = Decimal(1).scaleb(-DIV_PLACES)


def idiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (Python's // floors)."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(frozen=True)
class DecimalBackend:
    """
    Exact base-10 arithmetic for Julian Dates.

    add/sub/mul are exact; div is the only rounding step and quantizes the
    quotient to DIV_PLACES digits (half away from zero), so results are
    reproducible for the same decimal inputs.
    """
    kind: Literal["decimal"] = "decimal"

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return CTX.add(a, b)

    def sub(self, a: Decimal, b: Decimal) -> Decimal:
        return CTX.subtract(a, b)

    def mul(self, a: Decimal, b: Decimal) -> Decimal:
        return CTX.multiply(a, b)

    def div(self, a: Decimal, b: Decimal) -> Decimal:
        return CTX.divide(a, b).quantize(_QUANTUM, context=CTX)

    def trunc(self, a: Decimal) -> int:
        # toward zero
        return int(a)

    def round_half_away(self, a: Decimal) -> int:
        return int(a.to_integral_value(rounding=ROUND_HALF_UP, context=CTX))

    def from_int(self, n: int) -> Decimal:
        return Decimal(n)

    def coerce(self, value: Number) -> Decimal:
        """Convert a user supplied number to Decimal without going through binary floats."""
        if isinstance(value, bool):
            raise InvalidFieldError(f"not a number: {value!r}")
        if isinstance(value, Decimal):
            d = value
        elif isinstance(value, int):
            d = Decimal(value)
        elif isinstance(value, Fraction):
            return self.div(Decimal(value.numerator), Decimal(value.denominator))
        elif isinstance(value, float):
            # repr gives the shortest string that round-trips the float
            d = Decimal(repr(value))
        elif isinstance(value, str):
            try:
                d = Decimal(value.strip())
            except InvalidOperation:
                raise InvalidFieldError(f"not a decimal number: {value!r}") from None
        else:
            raise InvalidFieldError(f"unsupported number type: {type(value).__name__}")
        if not d.is_finite():
            raise InvalidFieldError(f"not a finite number: {value!r}")
        return d

    def canonical(self, a: Decimal) -> str:
        """Plain-notation string with trailing zeros stripped: '2440587.5', '2451545', '0'."""
        return format(a.normalize(CTX), "f")


D = DecimalBackend()

HALF = Decimal("0.5")
SECONDS_PER_DAY = 86400
MINUTES_PER_DAY = 1440
HOURS_PER_DAY = 24
J86400 = Decimal(SECONDS_PER_DAY)
