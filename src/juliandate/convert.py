"""
juliandate.convert
------------------
Calendar date-time <-> Julian Day.

JD counts days from noon UTC: an integer JD is noon, JD + 0.5 is the
following midnight. Dates before 1582-10-05 are read in the proleptic Julian
calendar, dates from 1582-10-15 on in the Gregorian one; the ten days in
between never existed and have no JD.

Algorithm after Fliegel & Van Flandern, as given in C. Tondering's calendar
FAQ. BCE years must be shifted to astronomical numbering (10 BCE = -9) before
entering the formulas, which holds for all dates after 4800 BCE.
"""

from __future__ import annotations

import logging
import math
import numbers

from .core.errors import InvalidJulianDayError
from .core.options import STANDARD, ConversionOptions
from .core.time import (
    REFORM_BOUNDARY_DECIMAL_YEAR,
    REFORM_MONTH,
    REFORM_YEAR,
    GAP_FIRST_DAY,
    decimal_year,
    from_astronomical_year,
    gregorian_to_jdn,
    in_reform_gap,
    jd_to_jdn,
    jd_to_ymd,
    jdn_to_ymd,
    julian_to_jdn,
    normalize_ymd,
    to_astronomical_year,
)
from .core.types import CalendarDateTime, DateTimeLike, JDResult, ProvisionalDate

logger = logging.getLogger(__name__)

MS_PER_HOUR = 3_600_000
MS_PER_DAY = 24 * MS_PER_HOUR

GAP_MESSAGE = "No JD defined between 1582-10-05 and 1582-10-14"


# ============================================================
# Calendar -> JD
# ============================================================

def _is_julian(d: DateTimeLike, year: int, options: ConversionOptions) -> bool:
    if options.regime_rule == "decimal_year":
        return decimal_year(d.year, d.month, d.day, d.days_in_month()) < REFORM_BOUNDARY_DECIMAL_YEAR
    return (year, d.month, d.day) < (REFORM_YEAR, REFORM_MONTH, GAP_FIRST_DAY)


def to_jd(d: DateTimeLike, options: ConversionOptions = STANDARD) -> JDResult:
    """
    Calendar date-time -> JD (UTC).

    Returns a JDResult; dates dropped by the Gregorian reform give
    status "undefined_gap" and no JD, and are logged as a warning.
    """
    year = to_astronomical_year(d.year)
    month = d.month + 1

    if in_reform_gap(year, month, d.day):
        msg = f"{GAP_MESSAGE} (got {year}-{month:02d}-{d.day:02d})"
        logger.warning(msg)
        return JDResult(status="undefined_gap", message=msg)

    julian = _is_julian(d, year, options)
    if julian:
        jdn = julian_to_jdn(year, month, d.day)
    else:
        jdn = gregorian_to_jdn(year, month, d.day)

    # JD is always UTC
    hour = d.hour if d.is_utc else d.hour - d.utc_offset / 60
    seconds = d.second
    if not julian or options.julian_milliseconds:
        seconds = d.second + d.millisecond / 1000

    jd = jdn + (hour - 12) / 24 + d.minute / 1440 + seconds / 86400
    logger.debug("to_jd %s -> %r (%s)", d, jd, "julian" if julian else "gregorian")
    return JDResult(status="defined", jd=jd)


# ============================================================
# JD -> Calendar
# ============================================================

def _checked(jd) -> float:
    if isinstance(jd, bool) or not isinstance(jd, numbers.Real):
        raise InvalidJulianDayError(f"JD must be a real number, got {type(jd).__name__}")
    x = float(jd)
    if not math.isfinite(x):
        raise InvalidJulianDayError(f"JD must be finite, got {x}")
    return x


def provisional_from_jd(jd: float) -> ProvisionalDate:
    """
    Invert the day count with the fractional-day formula and split the time
    of day, without carrying an overflowing day into the next month. Kept to
    compare against from_jd(); see core.time.jd_to_ymd() for where the two
    disagree.

    The fraction of the formula's day is time since noon: 0 is noon, 0.5 is
    the next midnight, below 0.5 the afternoon and evening, above it the
    small hours and morning of the next calendar day.
    """
    year, month, day, julian = jd_to_ymd(_checked(jd))
    whole = math.floor(day)
    frac = day - whole

    if frac == 0:
        ms = MS_PER_DAY // 2
    elif frac == 0.5:
        whole += 1
        ms = 0
    elif frac < 0.5:
        ms = round((frac + 0.5) * MS_PER_DAY)
    else:
        whole += 1
        ms = round((frac - 0.5) * MS_PER_DAY)

    # rounding up to 24:00
    if ms >= MS_PER_DAY:
        whole += 1
        ms -= MS_PER_DAY

    hour, ms = divmod(ms, MS_PER_HOUR)
    minute, ms = divmod(ms, 60_000)
    second, ms = divmod(ms, 1000)
    return ProvisionalDate(year, month, int(whole), hour, minute, second, ms, julian)


def normalized_provisional(jd: float) -> CalendarDateTime:
    """provisional_from_jd() followed by the normalize_ymd() carry pass."""
    p = provisional_from_jd(jd)
    year, month, day = normalize_ymd(p.year, p.month, p.day, julian=p.julian)
    return CalendarDateTime(
        year=from_astronomical_year(year),
        month=month - 1,
        day=day,
        hour=p.hour,
        minute=p.minute,
        second=p.second,
        millisecond=p.millisecond,
    )


def from_jd(jd: float) -> CalendarDateTime:
    """
    JD -> CalendarDateTime in UTC.

    The civil day is JDN = floor(JD + 0.5), inverted with integer arithmetic;
    the time of day is JD + 0.5 - JDN, rounded to the millisecond.

    >>> from_jd(2451545.0).isoformat()
    '2000-01-01T12:00:00.000Z'
    """
    x = _checked(jd)
    jdn = jd_to_jdn(x)
    ms = round((x + 0.5 - jdn) * MS_PER_DAY)

    # rounding up to 24:00
    if ms >= MS_PER_DAY:
        jdn += 1
        ms -= MS_PER_DAY

    year, month, day, _ = jdn_to_ymd(jdn)
    hour, ms = divmod(ms, MS_PER_HOUR)
    minute, ms = divmod(ms, 60_000)
    second, ms = divmod(ms, 1000)
    return CalendarDateTime(
        year=from_astronomical_year(year),
        month=month - 1,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        millisecond=ms,
    )
