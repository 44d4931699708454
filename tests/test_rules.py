# tests/test_rules.py

import pytest

from ajdcal.core.errors import InvalidFieldError
from ajdcal.core.rules import (
    astronomical_year,
    is_gregorian,
    is_leap_year,
    is_reform_gap,
    last_day_of_month,
)


@pytest.mark.parametrize(
    "year, leap",
    [
        (2024, True),
        (2023, False),
        (2000, True),
        (1900, False),
        (4, True),
        # century rule applies before the reform too
        (1500, False),
        (1600, True),
        # 1 BC is astronomical year 0
        (-1, True),
        (-2, False),
        (-5, True),
        (-101, False),
        (-401, True),
    ],
)
def test_uniform_leap_rule(year, leap):
    assert is_leap_year(year) is leap


def test_astronomical_year_skips_zero():
    assert astronomical_year(1) == 1
    assert astronomical_year(-1) == 0
    assert astronomical_year(-44) == -43


def test_last_day_of_month():
    assert [last_day_of_month(2023, m) for m in range(1, 13)] == [
        31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31
    ]
    assert last_day_of_month(2024, 2) == 29
    assert last_day_of_month(1900, 2) == 28
    assert last_day_of_month(-1, 2) == 29


@pytest.mark.parametrize("month", [0, 13, -1])
def test_last_day_of_month_rejects_bad_month(month):
    with pytest.raises(InvalidFieldError):
        last_day_of_month(2023, month)


def test_reform_gap():
    assert not is_reform_gap(1582, 10, 4)
    assert all(is_reform_gap(1582, 10, d) for d in range(5, 15))
    assert not is_reform_gap(1582, 10, 15)
    assert not is_reform_gap(1582, 11, 10)
    assert not is_reform_gap(1583, 10, 10)


def test_is_gregorian_cutover():
    assert is_gregorian(1582, 10, 15)
    assert is_gregorian(1582, 11, 1)
    assert is_gregorian(1600, 1, 1)
    assert not is_gregorian(1582, 10, 4)
    assert not is_gregorian(1000, 1, 1)
    assert not is_gregorian(-1, 12, 31)
