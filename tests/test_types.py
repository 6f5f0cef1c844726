# tests/test_types.py

from datetime import datetime, timedelta, timezone

import pytest

from juliandate import CalendarDateTime, JDResult, UndefinedDateGapError


def test_validation():
    with pytest.raises(ValueError):
        CalendarDateTime(0, 0, 1)
    with pytest.raises(ValueError):
        CalendarDateTime(2000, 12, 1)
    with pytest.raises(ValueError):
        CalendarDateTime(2001, 1, 29)
    with pytest.raises(ValueError):
        CalendarDateTime(2000, 0, 1, 24)
    with pytest.raises(ValueError):
        CalendarDateTime(2000, 0, 1, millisecond=1000)
    with pytest.raises(ValueError):
        CalendarDateTime(2000, 0, 1, utc_offset=60)


def test_hybrid_month_lengths():
    assert CalendarDateTime(1500, 1, 29).days_in_month() == 29
    assert CalendarDateTime(1700, 1, 1).days_in_month() == 28
    assert CalendarDateTime(-1, 1, 29).days_in_month() == 29
    # the dropped days stay representable
    assert CalendarDateTime(1582, 9, 10).days_in_month() == 31


def test_is_julian():
    assert CalendarDateTime(1582, 9, 4).is_julian
    assert not CalendarDateTime(1582, 9, 15).is_julian
    assert CalendarDateTime(-44, 2, 15).is_julian


def test_parse_and_format():
    d = CalendarDateTime.parse("2000-01-01T12:30:15.250Z")
    assert d == CalendarDateTime(2000, 0, 1, 12, 30, 15, 250)
    assert d.isoformat() == "2000-01-01T12:30:15.250Z"

    d = CalendarDateTime.parse("-0044-03-15")
    assert (d.year, d.month, d.day) == (-44, 2, 15)
    assert d.isoformat() == "-0044-03-15T00:00:00.000Z"

    d = CalendarDateTime.parse("2000-01-01T01:00+05:30")
    assert not d.is_utc
    assert d.utc_offset == 330
    assert d.isoformat() == "2000-01-01T01:00:00.000+05:30"

    d = CalendarDateTime.parse("2000-01-01 01:00:00.5-0300")
    assert d.millisecond == 500
    assert d.utc_offset == -180
    assert str(d) == "2000-01-01T01:00:00.500-03:00"


@pytest.mark.parametrize("text", ["", "2000/01/01", "2000-13-01", "0000-01-01", "2000-01-01T25:00"])
def test_parse_rejects(text):
    with pytest.raises(ValueError):
        CalendarDateTime.parse(text)


def test_datetime_interop():
    dt = datetime(2024, 2, 29, 23, 59, 58, 999999, tzinfo=timezone(timedelta(hours=-5)))
    d = CalendarDateTime.from_datetime(dt)
    assert d == CalendarDateTime(2024, 1, 29, 23, 59, 58, 999, is_utc=False, utc_offset=-300)
    assert d.to_datetime() == dt.replace(microsecond=999000)

    u = CalendarDateTime.from_datetime(datetime(2000, 1, 1, tzinfo=timezone.utc))
    assert u.is_utc
    assert u.to_datetime().tzinfo == timezone.utc


def test_datetime_interop_rejects():
    with pytest.raises(ValueError):
        CalendarDateTime.from_datetime(datetime(2000, 1, 1))
    with pytest.raises(ValueError):
        CalendarDateTime(1500, 0, 1).to_datetime()


def test_jd_result():
    ok = JDResult(status="defined", jd=2451545.0)
    assert ok.is_defined
    assert ok.unwrap() == 2451545.0

    gap = JDResult(status="undefined_gap", message="nope")
    assert not gap.is_defined
    with pytest.raises(UndefinedDateGapError, match="nope"):
        gap.unwrap()
