# tests/test_time.py

import pytest

from juliandate.core import time as jt


def test_year_numbering():
    assert jt.to_astronomical_year(-1) == 0
    assert jt.to_astronomical_year(-10) == -9
    assert jt.to_astronomical_year(1582) == 1582
    assert jt.from_astronomical_year(0) == -1
    assert jt.from_astronomical_year(-9) == -10
    assert jt.from_astronomical_year(1) == 1


def test_leap_rules():
    assert jt.is_julian_leap(1500)
    assert not jt.is_gregorian_leap(1500)
    assert jt.is_gregorian_leap(2000)
    assert not jt.is_gregorian_leap(1900)
    assert jt.is_julian_leap(0)
    assert jt.is_julian_leap(-4)
    assert not jt.is_julian_leap(-1)


def test_days_in_month():
    assert jt.days_in_month(1500, 2, julian=True) == 29
    assert jt.days_in_month(1500, 2, julian=False) == 28
    assert jt.days_in_month(2024, 2, julian=False) == 29
    assert jt.days_in_month(2023, 4, julian=False) == 30
    assert jt.days_in_month(2023, 12, julian=True) == 31


def test_jdn_formulas():
    assert jt.gregorian_to_jdn(2000, 1, 1) == 2451545
    assert jt.gregorian_to_jdn(1582, 10, 15) == 2299161
    assert jt.julian_to_jdn(1582, 10, 4) == 2299160
    assert jt.julian_to_jdn(-4712, 1, 1) == 0
    # the two calendars are 10 days apart in the 16th century
    assert jt.julian_to_jdn(1582, 10, 5) == jt.gregorian_to_jdn(1582, 10, 15)


def test_jd_to_jdn():
    assert jt.jd_to_jdn(2451545.0) == 2451545
    assert jt.jd_to_jdn(2451544.5) == 2451545
    assert jt.jd_to_jdn(2451544.4999) == 2451544
    assert jt.jd_to_jdn(-0.5) == 0
    assert jt.jd_to_jdn(-0.75) == -1


def test_jdn_to_ymd_regimes():
    assert jt.jdn_to_ymd(2451545) == (2000, 1, 1, False)
    assert jt.jdn_to_ymd(2299160) == (1582, 10, 4, True)
    assert jt.jdn_to_ymd(jt.REFORM_FIRST_GREGORIAN_JDN) == (1582, 10, 15, False)
    assert jt.jdn_to_ymd(0) == (-4712, 1, 1, True)


def test_jdn_to_ymd_march_first():
    for year in (1700, 1800, 1900, 2000, 2100):
        jdn = jt.gregorian_to_jdn(year, 3, 1)
        assert jt.jdn_to_ymd(jdn) == (year, 3, 1, False)
        feb_end = 29 if jt.is_gregorian_leap(year) else 28
        assert jt.jdn_to_ymd(jdn - 1) == (year, 2, feb_end, False)


def test_jdn_to_ymd_inverts_both_formulas():
    for jdn in range(jt.julian_to_jdn(-4712, 1, 1), jt.REFORM_FIRST_GREGORIAN_JDN, 997):
        y, m, d, julian = jt.jdn_to_ymd(jdn)
        assert julian
        assert jt.julian_to_jdn(y, m, d) == jdn
    for jdn in range(jt.REFORM_FIRST_GREGORIAN_JDN, jt.gregorian_to_jdn(3000, 1, 1), 13):
        y, m, d, julian = jt.jdn_to_ymd(jdn)
        assert not julian
        assert jt.gregorian_to_jdn(y, m, d) == jdn


def test_jd_to_ymd_regimes():
    y, m, d, julian = jt.jd_to_ymd(2451545.0)
    assert (y, m, d, julian) == (2000, 1, 1, False)
    y, m, d, julian = jt.jd_to_ymd(2299160.0)
    assert (y, m, d, julian) == (1582, 10, 4, True)
    y, m, d, julian = jt.jd_to_ymd(jt.REFORM_BOUNDARY_JD)
    assert (y, m, julian) == (1582, 10, False)
    assert d == 14.5


def test_in_reform_gap():
    assert not jt.in_reform_gap(1582, 10, 4)
    assert all(jt.in_reform_gap(1582, 10, d) for d in range(5, 15))
    assert not jt.in_reform_gap(1582, 10, 15)
    assert not jt.in_reform_gap(1583, 10, 10)
    assert not jt.in_reform_gap(1582, 11, 10)


def test_normalize_overflow_and_underflow():
    assert jt.normalize_ymd(2001, 2, 29, julian=False) == (2001, 3, 1)
    assert jt.normalize_ymd(2000, 2, 29, julian=False) == (2000, 2, 29)
    assert jt.normalize_ymd(1999, 12, 32, julian=False) == (2000, 1, 1)
    assert jt.normalize_ymd(2000, 4, 0, julian=False) == (2000, 3, 31)
    assert jt.normalize_ymd(2000, 1, 0, julian=False) == (1999, 12, 31)
    assert jt.normalize_ymd(1500, 2, 29, julian=True) == (1500, 2, 29)


def test_normalize_julian_reform_shift():
    assert jt.normalize_ymd(1582, 10, 5, julian=True) == (1582, 10, 15)
    assert jt.normalize_ymd(1582, 10, 4, julian=True) == (1582, 10, 4)


def test_decimal_year_boundary():
    assert jt.decimal_year(1582, 9, 5, 31) == pytest.approx(jt.REFORM_BOUNDARY_DECIMAL_YEAR, abs=1e-9)
    assert jt.decimal_year(1582, 9, 4, 31) < jt.REFORM_BOUNDARY_DECIMAL_YEAR
    assert jt.decimal_year(1582, 9, 15, 31) > jt.REFORM_BOUNDARY_DECIMAL_YEAR
    # not monotonic across months
    assert jt.decimal_year(1581, 11, 31, 31) == 1583.0
