from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal, Optional, Protocol

from .errors import UndefinedDateGapError
from .time import (
    GAP_FIRST_DAY,
    REFORM_MONTH,
    REFORM_YEAR,
    days_in_month,
    to_astronomical_year,
    uses_julian_rules,
)


class DateTimeLike(Protocol):
    """Fields to_jd() reads from a calendar date-time (month is 0-indexed)."""
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    is_utc: bool
    utc_offset: int

    def days_in_month(self) -> int: ...


_ISO_RE = re.compile(
    r"^(?P<year>[+-]?\d{1,6})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<ms>\d{1,3}))?)?)?"
    r"(?P<tz>Z|[+-]\d{2}:?\d{2})?$"
)


@dataclass(frozen=True)
class CalendarDateTime:
    """
    A date-time of the hybrid Julian/Gregorian calendar.

    Years carry no zero: -1 is 1 BCE, -10 is 10 BCE. Months are 0-indexed.
    utc_offset is in minutes east of UTC and only read when is_utc is False.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    is_utc: bool = True
    utc_offset: int = 0

    def __post_init__(self) -> None:
        if self.year == 0:
            raise ValueError("there is no year 0; 1 BCE is year -1")
        if not 0 <= self.month <= 11:
            raise ValueError(f"month must be in 0..11, got {self.month}")
        if not 1 <= self.day <= self.days_in_month():
            raise ValueError(
                f"day must be in 1..{self.days_in_month()} for {self.year}-{self.month + 1:02d}, got {self.day}"
            )
        for name, hi in (("hour", 23), ("minute", 59), ("second", 59), ("millisecond", 999)):
            v = getattr(self, name)
            if not 0 <= v <= hi:
                raise ValueError(f"{name} must be in 0..{hi}, got {v}")
        if self.is_utc and self.utc_offset != 0:
            raise ValueError("a UTC value cannot carry a non-zero utc_offset")

    @classmethod
    def utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> "CalendarDateTime":
        return cls(year, month, day, hour, minute, second, millisecond)

    def days_in_month(self) -> int:
        y = to_astronomical_year(self.year)
        return days_in_month(y, self.month + 1, julian=uses_julian_rules(y))

    @property
    def is_julian(self) -> bool:
        """True when the date lies before 1582-10-05, the first dropped day."""
        y = to_astronomical_year(self.year)
        return (y, self.month, self.day) < (REFORM_YEAR, REFORM_MONTH, GAP_FIRST_DAY)

    # ---------------------------------------------------------
    # Text form
    # ---------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "CalendarDateTime":
        """
        Parse [-]YYYY-MM-DD[THH:MM[:SS[.mmm]]][Z|+HH:MM].

        The month is 1-based in text; the year uses the no-year-zero sign
        convention of the dataclass. A missing zone means UTC.
        """
        mt = _ISO_RE.match(text.strip())
        if mt is None:
            raise ValueError(f"not a date-time: {text!r}")
        g = mt.groupdict()
        ms = g["ms"] or "0"
        ms = int(ms.ljust(3, "0"))

        tz = g["tz"]
        if tz is None or tz == "Z":
            is_utc, offset = True, 0
        else:
            sign = -1 if tz[0] == "-" else 1
            digits = tz[1:].replace(":", "")
            offset = sign * (int(digits[:2]) * 60 + int(digits[2:]))
            is_utc = False

        return cls(
            year=int(g["year"]),
            month=int(g["month"]) - 1,
            day=int(g["day"]),
            hour=int(g["hour"] or 0),
            minute=int(g["minute"] or 0),
            second=int(g["second"] or 0),
            millisecond=ms,
            is_utc=is_utc,
            utc_offset=offset,
        )

    def isoformat(self) -> str:
        sign = "-" if self.year < 0 else ""
        s = (
            f"{sign}{abs(self.year):04d}-{self.month + 1:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}.{self.millisecond:03d}"
        )
        if self.is_utc:
            return s + "Z"
        off = self.utc_offset
        tz_sign = "-" if off < 0 else "+"
        hh, mm = divmod(abs(off), 60)
        return s + f"{tz_sign}{hh:02d}:{mm:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    # ---------------------------------------------------------
    # datetime interop
    # ---------------------------------------------------------

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CalendarDateTime":
        """
        Copy the civil fields of a timezone-aware datetime.

        datetime is proleptic Gregorian, so values before the reform are read
        as hybrid-calendar labels, not re-dated.
        """
        if dt.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        offset = dt.utcoffset()
        minutes = int(offset.total_seconds() // 60) if offset is not None else 0
        return cls(
            year=dt.year,
            month=dt.month - 1,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
            millisecond=dt.microsecond // 1000,
            is_utc=minutes == 0,
            utc_offset=minutes,
        )

    def to_datetime(self) -> datetime:
        """Timezone-aware datetime; only Gregorian-era years 1582..9999."""
        if self.is_julian or self.year > 9999:
            raise ValueError(f"{self.isoformat()} is outside the range datetime can represent")
        tz = timezone.utc if self.is_utc else timezone(timedelta(minutes=self.utc_offset))
        return datetime(
            self.year, self.month + 1, self.day,
            self.hour, self.minute, self.second, self.millisecond * 1000,
            tzinfo=tz,
        )


@dataclass(frozen=True)
class ProvisionalDate:
    """Raw output of the inverse day count, before the overflow carry."""
    year: int          # astronomical
    month: int         # 1-based
    day: int           # may exceed the month length
    hour: int
    minute: int
    second: int
    millisecond: int
    julian: bool


@dataclass(frozen=True)
class JDResult:
    status: Literal["defined", "undefined_gap"]
    jd: Optional[float] = None
    message: str = ""

    @property
    def is_defined(self) -> bool:
        return self.status == "defined"

    def unwrap(self) -> float:
        if self.jd is None:
            raise UndefinedDateGapError(self.message or "no Julian Day defined")
        return self.jd
