# tests/test_time.py

import random
from decimal import Decimal

import pytest

from ajdcal.core.errors import AJDError, InvalidFieldError, ReformGapError, UnderflowError
from ajdcal.core.rules import is_reform_gap, last_day_of_month
from ajdcal.core.time import civil_to_jd, day_fraction, jd_to_civil
from ajdcal.core.types import CivilDateTime as C

JST = Decimal("0.375")


def test_known_epochs():
    """Unix epoch, J2000.0 and JD 0 (4713 BC January 1, noon)."""
    assert civil_to_jd(C(1970, 1, 1)) == Decimal("2440587.5")
    assert civil_to_jd(C(2000, 1, 1, 12)) == Decimal("2451545")
    assert civil_to_jd(C(-4713, 1, 1, 12)) == 0
    assert civil_to_jd(C(1, 1, 1)) == Decimal("1721423.5")
    assert civil_to_jd(C(-1, 1, 1)) == Decimal("1721057.5")


def test_offset_is_subtracted():
    assert civil_to_jd(C(1970, 1, 1, 9), JST) == Decimal("2440587.5")
    assert civil_to_jd(C(1970, 1, 1), JST) == Decimal("2440587.125")


def test_decode_known_epochs():
    assert jd_to_civil(Decimal("2440587.5")) == C(1970, 1, 1)
    assert jd_to_civil(Decimal("2451545")) == C(2000, 1, 1, 12)
    assert jd_to_civil(Decimal("2451545"), JST) == C(2000, 1, 1, 21)
    assert jd_to_civil(Decimal(0)) == C(-4713, 1, 1, 12)
    assert jd_to_civil(Decimal("1721057.5")) == C(-1, 1, 1)


def test_cutover_discontinuity():
    last_julian = civil_to_jd(C(1582, 10, 4))
    first_gregorian = civil_to_jd(C(1582, 10, 15))
    assert last_julian == Decimal("2299159.5")
    assert first_gregorian == Decimal("2299160.5")
    assert first_gregorian - last_julian == 1

    assert jd_to_civil(Decimal("2299159.5")) == C(1582, 10, 4)
    assert jd_to_civil(Decimal("2299160.5")) == C(1582, 10, 15)
    assert jd_to_civil(Decimal("2299160.49999")) == C(1582, 10, 4, 23, 59, 59)


@pytest.mark.parametrize("day", range(5, 15))
def test_reform_gap_days_are_rejected(day):
    with pytest.raises(ReformGapError):
        civil_to_jd(C(1582, 10, day))


@pytest.mark.parametrize(
    "civil",
    [
        C(0, 1, 1),
        C(2023, 0, 1),
        C(2023, 13, 1),
        C(2023, 1, 0),
        C(2023, 1, 32),
        C(2023, 2, 29),
        C(1900, 2, 29),
        # valid in the historical Julian calendar, rejected by the uniform rule
        C(1500, 2, 29),
        C(2023, 1, 1, 24),
        C(2023, 1, 1, -1),
        C(2023, 1, 1, 0, 60),
        C(2023, 1, 1, 0, 0, 60),
        C(2023, 1, 1, 0, 0, -1),
        C(2023, 1, 1.5),
    ],
)
def test_invalid_fields_are_rejected(civil):
    with pytest.raises(InvalidFieldError):
        civil_to_jd(civil)


def test_error_taxonomy_shares_a_base():
    for exc in (InvalidFieldError, ReformGapError, UnderflowError):
        assert issubclass(exc, AJDError)
        assert issubclass(exc, ValueError)


def test_leap_day_of_1_bc_is_valid():
    jd = civil_to_jd(C(-1, 2, 29))
    assert jd_to_civil(jd) == C(-1, 2, 29)
    assert civil_to_jd(C(-1, 3, 1)) - jd == 1


def test_underflow_boundary():
    assert civil_to_jd(C(-4713, 1, 1, 12)) == 0
    with pytest.raises(UnderflowError):
        civil_to_jd(C(-4713, 1, 1, 11, 59, 59))
    with pytest.raises(UnderflowError):
        civil_to_jd(C(-4713, 1, 1, 12), JST)
    with pytest.raises(UnderflowError):
        jd_to_civil(Decimal("-0.00000001"))


@pytest.mark.parametrize(
    "jd, expected",
    [
        # fraction rounds up to 24:00:00 -> next day
        ("2451544.499999999", C(2000, 1, 1)),
        # ... into the next month
        ("2415079.499999999", C(1900, 3, 1)),
        ("2451603.499999999", C(2000, 2, 29)),
        # ... across the missing year zero
        ("1721423.499999999", C(1, 1, 1)),
        # ... from the last Julian day over the reform gap
        ("2299160.499999999", C(1582, 10, 15)),
    ],
)
def test_hour_24_rollover(jd, expected):
    c = jd_to_civil(Decimal(jd))
    assert c == expected
    assert not is_reform_gap(*c.date_tuple())


def test_rollover_into_cutover_is_a_valid_date():
    c = jd_to_civil(Decimal("2299160.499999999"))
    # re-encoding the decoded fields must not hit the gap
    assert civil_to_jd(c) == Decimal("2299160.5")


def test_seconds_round_half_away():
    # 0.4 s after midnight rounds down, 0.6 s rounds up
    base = Decimal("2451544.5")
    assert jd_to_civil(base + Decimal("0.4") / 86400) == C(2000, 1, 1)
    assert jd_to_civil(base + Decimal("0.6") / 86400) == C(2000, 1, 1, 0, 0, 1)


def test_day_fraction():
    assert day_fraction(24, 24) == 1
    assert day_fraction(1, 24) == Decimal("0.04166666666666666667")
    assert day_fraction(-1, 86400) == Decimal("-0.00001157407407407407")


def _random_civil(rng):
    while True:
        y = rng.randint(-4712, 9999)
        if y == 0:
            continue
        m = rng.randint(1, 12)
        d = rng.randint(1, last_day_of_month(y, m))
        if is_reform_gap(y, m, d):
            continue
        return C(y, m, d, rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59))


@pytest.mark.parametrize("offset", [Decimal(0), JST, Decimal("-0.20833333333333333333")])
def test_civil_jd_roundtrip(offset):
    rng = random.Random(42)
    for _ in range(5000):
        c = _random_civil(rng)
        assert jd_to_civil(civil_to_jd(c, offset), offset) == c


def test_consecutive_days_are_one_jd_apart():
    rng = random.Random(7)
    for _ in range(2000):
        c = _random_civil(rng)
        if c.day >= 28 or (c.year, c.month, c.day) == (1582, 10, 4):
            continue
        nxt = C(c.year, c.month, c.day + 1, c.hour, c.minute, c.second)
        assert civil_to_jd(nxt) - civil_to_jd(c) == 1
