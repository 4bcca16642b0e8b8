from __future__ import annotations

import datetime

import pytest

from zonetime import ArgErr, CalendarDate, DateTime, Duration, ParseErr, UnsupportedErr, WallTime, ZoneId


def test_make_and_accessors() -> None:
    dt = DateTime.make(2023, 6, 15, 10, 30, 5, 7)
    assert dt.date() == CalendarDate(2023, 6, 15)
    assert dt.time() == WallTime(10, 30, 5, 7)
    assert (dt.year(), dt.month(), dt.day()) == (2023, 6, 15)
    assert (dt.hour(), dt.minute(), dt.second(), dt.millisecond()) == (10, 30, 5, 7)
    assert dt.day_of_week() == 4
    assert dt.day_of_year() == 166


def test_requires_date_and_time() -> None:
    with pytest.raises(ArgErr):
        DateTime("2023-01-01", WallTime(0))
    with pytest.raises(ArgErr):
        DateTime.make(2023, 2, 29)


def test_sub_day_arithmetic_carries_into_date() -> None:
    assert DateTime.make(2023, 12, 31, 23).plus_hours(2) == DateTime.make(2024, 1, 1, 1)
    assert DateTime.make(2024, 3, 1, 0, 10).minus_minutes(20) == DateTime.make(2024, 2, 29, 23, 50)
    assert DateTime.make(2023, 1, 1).plus(Duration.of(hours=25, minutes=1)) == DateTime.make(2023, 1, 2, 1, 1)
    assert DateTime.make(2023, 1, 1).minus_millis(1) == DateTime.make(2022, 12, 31, 23, 59, 59, 999)


def test_date_arithmetic_keeps_time() -> None:
    dt = DateTime.make(2023, 1, 31, 8, 15)
    assert dt.plus_months(1) == DateTime.make(2023, 2, 28, 8, 15)
    assert dt.plus_years(1) == DateTime.make(2024, 1, 31, 8, 15)
    assert dt.plus_weeks(1) == DateTime.make(2023, 2, 7, 8, 15)
    assert dt.minus_days(31) == DateTime.make(2022, 12, 31, 8, 15)
    assert DateTime.make(2023, 1, 1).plus_days(36500) == DateTime.make(2122, 12, 8)


def test_difference() -> None:
    a = DateTime.make(2023, 1, 2, 12)
    b = DateTime.make(2023, 1, 1, 6)
    assert a - b == Duration.of_hours(30)
    assert b.minus_date_time(a) == Duration.of_hours(-30)
    assert a - Duration.of_hours(6) == DateTime.make(2023, 1, 2, 6)


def test_epoch_milli() -> None:
    assert DateTime.from_epoch_milli(0) == DateTime.make(1970, 1, 1)
    assert DateTime.from_epoch_milli(-1) == DateTime.make(1969, 12, 31, 23, 59, 59, 999)
    dt = DateTime.make(2023, 12, 25, 20)
    assert DateTime.from_epoch_milli(dt.to_epoch_milli()) == dt
    assert dt.to_epoch_milli() == 1_703_534_400_000


def test_compare_date_first() -> None:
    assert DateTime.make(2023, 1, 1, 23) < DateTime.make(2023, 1, 2, 0)
    assert DateTime.make(2023, 1, 2, 1) > DateTime.make(2023, 1, 2, 0, 59)
    assert DateTime.make(2023, 1, 1) == DateTime.of(CalendarDate(2023, 1, 1), WallTime.midnight())


def test_with_date_and_time() -> None:
    dt = DateTime.make(2023, 5, 6, 7, 8)
    assert dt.with_date(CalendarDate(2020, 1, 1)) == DateTime.make(2020, 1, 1, 7, 8)
    assert dt.with_time(WallTime(0, 1)) == DateTime.make(2023, 5, 6, 0, 1)


def test_at_zone() -> None:
    z = DateTime.make(2023, 7, 4, 12).at_zone(ZoneId.AMERICA_NEW_YORK)
    assert z.local_date_time() == DateTime.make(2023, 7, 4, 12)
    assert z.offset() == Duration.of_hours(-4)


def test_to_str_and_parse() -> None:
    assert DateTime.make(2023, 6, 15, 10, 30).to_str() == "2023-06-15T10:30:00"
    assert DateTime.parse("2023-06-15T10:30") == DateTime.make(2023, 6, 15, 10, 30)
    assert DateTime.parse("2023-06-15T10:30:00.250") == DateTime.make(2023, 6, 15, 10, 30, 0, 250)


@pytest.mark.parametrize("s", ["2023-06-15 10:30", "2023-06-15T10:30T", "T10:30", "2023-06-15"])
def test_parse_malformed(s: str) -> None:
    with pytest.raises(ParseErr):
        DateTime.parse(s)
    assert DateTime.parse(s, checked=False) is None


def test_fields() -> None:
    dt = DateTime.make(2023, 6, 15, 10, 30)
    assert dt.get("hour") == 10
    assert dt.get("day") == 15
    with pytest.raises(UnsupportedErr):
        dt.get("offset_millis")


def test_py_interop() -> None:
    dt = DateTime.make(2023, 6, 15, 10, 30, 1, 2)
    assert dt.to_py() == datetime.datetime(2023, 6, 15, 10, 30, 1, 2000)
    assert DateTime.from_py(datetime.datetime(2023, 6, 15, 10, 30, 1, 2999)) == dt


def test_arithmetic_requires_int_delta() -> None:
    dt = DateTime.make(2023, 1, 1, 12)
    with pytest.raises(ArgErr):
        dt.plus_hours(0.5)
    with pytest.raises(ArgErr):
        dt.minus_minutes(1.5)
    with pytest.raises(ArgErr):
        dt.plus_days(1.5)


def test_zoned_arithmetic_requires_int_delta() -> None:
    from zonetime import ZonedDateTime
    z = ZonedDateTime.make(2023, 1, 1, 12, zone=ZoneId.ASIA_TOKYO)
    with pytest.raises(ArgErr):
        z.plus_hours(0.5)
    assert z.plus_hours(1).hour() == 13
