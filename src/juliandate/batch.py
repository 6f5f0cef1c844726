"""
juliandate.batch
----------------
Array versions of to_jd / from_jd on numpy arrays.

Same formulas and rounding as juliandate.convert; gap dates become NaN
instead of a JDResult. Install with:
  pip install "juliandate[array]"
"""

from __future__ import annotations

from typing import Dict

from .core.errors import InvalidJulianDayError
from .core.options import STANDARD, ConversionOptions
from .core.time import (
    GAP_FIRST_DAY,
    GAP_LAST_DAY,
    REFORM_BOUNDARY_DECIMAL_YEAR,
    REFORM_FIRST_GREGORIAN_JDN,
    REFORM_MONTH,
    REFORM_YEAR,
)

MS_PER_DAY = 86_400_000
_MONTH_DAYS = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "juliandate[array]"') from e


def _month_length(np, year, month, julian):
    """Vectorised days_in_month (astronomical years, 1-based months)."""
    base = np.asarray(_MONTH_DAYS)[month]
    jul_leap = year % 4 == 0
    greg_leap = jul_leap & ((year % 100 != 0) | (year % 400 == 0))
    leap = np.where(julian, jul_leap, greg_leap)
    return base + ((month == 2) & leap)


def to_jd_array(
    year,
    month,
    day,
    hour=0,
    minute=0,
    second=0,
    millisecond=0,
    *,
    utc_offset=0,
    options: ConversionOptions = STANDARD,
):
    """
    Vectorised to_jd. Arguments broadcast against each other; month is
    0-indexed and year uses the no-year-zero convention of CalendarDateTime.
    utc_offset is minutes east of UTC (0 means UTC).
    """
    np = _need_numpy()
    year, month0, day, hour, minute, second, millisecond, utc_offset = np.broadcast_arrays(
        *(np.asarray(v) for v in (year, month, day, hour, minute, second, millisecond, utc_offset))
    )
    y = np.where(year < 0, year + 1, year).astype(np.int64)
    mo = month0.astype(np.int64) + 1
    day = day.astype(np.int64)

    gap = (y == REFORM_YEAR) & (mo == REFORM_MONTH + 1) & (day >= GAP_FIRST_DAY) & (day <= GAP_LAST_DAY)

    if options.regime_rule == "decimal_year":
        length = _month_length(np, y, mo, y < REFORM_YEAR)
        julian = (year + mo / 12 + day / length) < REFORM_BOUNDARY_DECIMAL_YEAR
    else:
        julian = (y < REFORM_YEAR) | (
            (y == REFORM_YEAR) & ((month0 < REFORM_MONTH) | ((month0 == REFORM_MONTH) & (day < GAP_FIRST_DAY)))
        )

    a = (14 - mo) // 12
    yy = y + 4800 - a
    m = mo + 12 * a - 3
    common = day + (153 * m + 2) // 5 + 365 * yy + yy // 4
    jdn = np.where(julian, common - 32083, common - yy // 100 + yy // 400 - 32045)

    seconds = second + millisecond / 1000
    if not options.julian_milliseconds:
        seconds = np.where(julian, second, seconds)

    jd = jdn + (hour - utc_offset / 60 - 12) / 24 + minute / 1440 + seconds / 86400
    return np.where(gap, np.nan, jd)


def from_jd_array(jd) -> Dict[str, "object"]:
    """
    Vectorised from_jd. Returns a dict of int64 arrays keyed
    year, month (0-indexed), day, hour, minute, second, millisecond.
    """
    np = _need_numpy()
    jd = np.asarray(jd, dtype=float)
    if not np.all(np.isfinite(jd)):
        raise InvalidJulianDayError("JD array contains NaN or infinite values")

    # civil day and milliseconds since its midnight
    jdn = np.floor(jd + 0.5)
    ms = np.rint((jd + 0.5 - jdn) * MS_PER_DAY).astype(np.int64)
    jdn = jdn.astype(np.int64)

    carry = ms >= MS_PER_DAY
    ms = ms - carry * MS_PER_DAY
    jdn = jdn + carry

    julian = jdn < REFORM_FIRST_GREGORIAN_JDN
    a = jdn + 32044
    b = np.where(julian, 0, (4 * a + 3) // 146097)
    c = np.where(julian, jdn + 32082, a - (146097 * b) // 4)

    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10

    hour, ms = np.divmod(ms, 3_600_000)
    minute, ms = np.divmod(ms, 60_000)
    second, ms = np.divmod(ms, 1000)

    return {
        "year": np.where(year <= 0, year - 1, year),
        "month": month - 1,
        "day": day,
        "hour": hour,
        "minute": minute,
        "second": second,
        "millisecond": ms,
    }
