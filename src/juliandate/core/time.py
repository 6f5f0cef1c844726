from __future__ import annotations

import math
from typing import Tuple


# ============================================================
# Reform constants
# ============================================================

# Last Julian day is 1582-10-04, first Gregorian day is 1582-10-15.
REFORM_YEAR = 1582
REFORM_MONTH = 9           # October, 0-indexed
GAP_FIRST_DAY = 5
GAP_LAST_DAY = 14
GAP_DAYS = GAP_LAST_DAY - GAP_FIRST_DAY + 1

# 1582 + 10/12 + 5/31: decimal-year image of 1582-10-05
REFORM_BOUNDARY_DECIMAL_YEAR = 1582.994623655914

# JD of 1582-10-15T00:00 UTC (Gregorian) == 1582-10-05T00:00 UTC (Julian)
REFORM_BOUNDARY_JD = 2299160.5

# JDN of 1582-10-15, the first Gregorian day
REFORM_FIRST_GREGORIAN_JDN = 2299161

JD_J2000 = 2451545.0

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# ============================================================
# Year numbering
# ============================================================

def to_astronomical_year(year: int) -> int:
    """Signed year without zero (-1 = 1 BCE) -> astronomical year (0 = 1 BCE)."""
    return year + 1 if year < 0 else year


def from_astronomical_year(year: int) -> int:
    """Astronomical year -> signed year without zero."""
    return year - 1 if year <= 0 else year


# ============================================================
# Leap rules / month lengths (astronomical years, 1-based months)
# ============================================================

def is_julian_leap(year: int) -> bool:
    return year % 4 == 0


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int, *, julian: bool) -> int:
    if month == 2:
        leap = is_julian_leap(year) if julian else is_gregorian_leap(year)
        return 29 if leap else 28
    return _MONTH_DAYS[month - 1]


def uses_julian_rules(year: int) -> bool:
    """Month lengths of the hybrid calendar follow the Julian rule before 1582."""
    return year < REFORM_YEAR


def in_reform_gap(year: int, month: int, day: int) -> bool:
    """True for 1582-10-05..1582-10-14 (astronomical year, 1-based month)."""
    return (
        year == REFORM_YEAR
        and month == REFORM_MONTH + 1
        and GAP_FIRST_DAY <= day <= GAP_LAST_DAY
    )


# ============================================================
# Calendar date <-> JDN (Fliegel-Van Flandern)
# ============================================================

def _shifted(year: int, month: int) -> Tuple[int, int]:
    a = (14 - month) // 12
    return year + 4800 - a, month + 12 * a - 3


def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Julian date (astronomical year, 1-based month) -> JDN at noon."""
    y, m = _shifted(year, month)
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian date (astronomical year, 1-based month) -> JDN at noon."""
    y, m = _shifted(year, month)
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jd_to_jdn(jd: float) -> int:
    """
    JD (days from noon) -> JDN of the civil day containing it.

      JDN = floor(JD + 0.5)
    """
    return int(math.floor(jd + 0.5))


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int, bool]:
    """
    JDN -> (astronomical year, 1-based month, day, julian) in the hybrid
    calendar: Julian before 1582-10-15, Gregorian from then on.
    """
    julian = jdn < REFORM_FIRST_GREGORIAN_JDN
    if julian:
        b = 0
        c = jdn + 32082
    else:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day, julian


def jd_to_ymd(jd: float) -> Tuple[int, int, float, bool]:
    """
    Fractional-day inverse, as published with the to_jd formulas.

    Returns (astronomical year, 1-based month, fractional day, julian). The
    fractional part of the day is the time since noon of that day. The day may
    fall outside the month (0.3 for the evening of Mar 31 filed under April,
    29 for a Feb 29 of a common year), and running normalize_ymd() afterwards
    does not always recover the date: Mar 1 before noon of a Gregorian common
    century year comes out as Feb 29.5 and carries to Mar 2. Use jd_to_jdn()
    and jdn_to_ymd() for conversion.
    """
    julian = jd < REFORM_BOUNDARY_JD
    if julian:
        b = 0
        c = jd + 32082
    else:
        a = jd + 32044
        b = math.floor((4 * a + 3) / 146097)
        c = a - math.floor((146097 * b) / 4)

    d = math.floor((4 * c) / 1461)
    e = c - math.floor((1461 * d) / 4)
    m = math.floor((5 * e + 2) / 153)

    day = e - math.floor((153 * m + 2) / 5) + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return int(year), int(month), day, julian


def normalize_ymd(year: int, month: int, day: int, *, julian: bool) -> Tuple[int, int, int]:
    """
    Carry an out-of-range day into month and year.

    The inverse day count yields day 0 for evenings of the last day of some
    months (the previous month's last day) and day n+1 for Feb 29 of common
    years or the small hours after a month's last day.

    A Julian-calendar result that lands on or after 1582-10-05 is moved past
    the dropped days so it reads as the Gregorian date of the same day.
    """
    while day < 1:
        month -= 1
        if month < 1:
            month = 12
            year -= 1
        day += days_in_month(year, month, julian=julian)

    while day > days_in_month(year, month, julian=julian):
        day -= days_in_month(year, month, julian=julian)
        month += 1
        if month > 12:
            month = 1
            year += 1

    if julian and (year, month, day) >= (REFORM_YEAR, REFORM_MONTH + 1, GAP_FIRST_DAY):
        day += GAP_DAYS
        return normalize_ymd(year, month, day, julian=False)
    return year, month, day


# ============================================================
# Decimal-year approximant
# ============================================================

def decimal_year(year: int, month0: int, day: int, month_length: int) -> float:
    """
    year + (month0 + 1)/12 + day/month_length

    Only monotonic inside a month; it is the quick reform test of the legacy
    preset, for which 1582-10-05 maps exactly to REFORM_BOUNDARY_DECIMAL_YEAR.
    """
    return year + (month0 + 1) / 12 + day / month_length
