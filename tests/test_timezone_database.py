from __future__ import annotations

import pytest

from zonetime import (
    CalendarDate, DateTime, DstRule, DstTransition, Duration, TimezoneDatabase,
    TimezoneOffsetData, ZoneId,
)


def resolve(zone: str, *args: int) -> TimezoneOffsetData:
    return TimezoneDatabase.resolve(ZoneId.of(zone), DateTime.make(*args))


def test_new_york_summer_and_winter() -> None:
    summer = resolve("America/New_York", 2023, 7, 15, 12)
    assert summer.offset() == Duration.of_hours(-4)
    assert summer.is_dst()
    assert summer.abbreviation() == "EDT"

    winter = resolve("America/New_York", 2023, 1, 15, 12)
    assert winter.offset() == Duration.of_hours(-5)
    assert not winter.is_dst()
    assert winter.abbreviation() == "EST"


@pytest.mark.parametrize("day, dst", [(11, False), (12, True), (13, True)])
def test_new_york_spring_transition_day(day: int, dst: bool) -> None:
    assert resolve("America/New_York", 2023, 3, day, 2, 30).is_dst() is dst


@pytest.mark.parametrize("day, dst", [(4, True), (5, False)])
def test_new_york_fall_transition_day(day: int, dst: bool) -> None:
    assert resolve("America/New_York", 2023, 11, day, 12).is_dst() is dst


def test_europe_last_sunday_rules() -> None:
    assert resolve("Europe/London", 2023, 3, 25, 12).offset_millis() == 0
    assert resolve("Europe/London", 2023, 3, 25, 12).abbreviation() == "GMT"
    assert resolve("Europe/London", 2023, 3, 26, 12).offset() == Duration.of_hours(1)
    assert resolve("Europe/London", 2023, 3, 26, 12).abbreviation() == "BST"
    assert resolve("Europe/London", 2023, 10, 28, 12).is_dst()
    assert not resolve("Europe/London", 2023, 10, 29, 12).is_dst()
    assert resolve("Europe/Paris", 2023, 7, 1).abbreviation() == "CEST"


def test_sydney_southern_hemisphere() -> None:
    july = resolve("Australia/Sydney", 2023, 7, 1, 12)
    assert july.offset() == Duration.of_hours(10)
    assert not july.is_dst()
    assert july.abbreviation() == "AEST"

    january = resolve("Australia/Sydney", 2023, 1, 15, 12)
    assert january.offset() == Duration.of_hours(11)
    assert january.is_dst()
    assert january.abbreviation() == "AEDT"


def test_fractional_offsets() -> None:
    assert resolve("Asia/Kolkata", 2023, 7, 1).offset() == Duration.of_minutes(330)
    assert resolve("Asia/Kathmandu", 2023, 7, 1).offset() == Duration.of_minutes(345)
    assert resolve("Asia/Tehran", 2023, 7, 1).offset() == Duration.of_minutes(210)
    assert resolve("Pacific/Chatham", 2023, 7, 1).offset() == Duration.of_minutes(765)
    assert resolve("Australia/Darwin", 2023, 1, 1).offset() == Duration.of_minutes(570)


def test_zones_without_rule_stay_standard() -> None:
    assert resolve("Australia/Adelaide", 2023, 7, 1).offset() == Duration.of_minutes(570)
    assert resolve("Australia/Adelaide", 2023, 1, 1).offset() == Duration.of_minutes(570)
    assert not resolve("Pacific/Auckland", 2023, 1, 1).is_dst()
    assert resolve("Africa/Casablanca", 2023, 7, 1).offset() == Duration.of_hours(1)


def test_america_prefix_uses_north_american_rule() -> None:
    assert resolve("America/Sao_Paulo", 2023, 7, 1).offset() == Duration.of_hours(-2)
    assert resolve("America/Sao_Paulo", 2023, 1, 1).offset() == Duration.of_hours(-3)
    assert not resolve("America/Phoenix", 2023, 7, 1).is_dst()
    assert resolve("America/Phoenix", 2023, 7, 1).offset() == Duration.of_hours(-7)


def test_abbreviation_ids_are_fixed() -> None:
    assert resolve("EST", 2023, 7, 1).offset() == Duration.of_hours(-5)
    assert resolve("CEST", 2023, 1, 1).offset() == Duration.of_hours(2)
    assert resolve("Asia/Tokyo", 2023, 7, 1).abbreviation() == "JST"
    assert resolve("Asia/Dubai", 2023, 7, 1).abbreviation() == "Asia/Dubai"


def test_fixed_offset_ids() -> None:
    data = resolve("+05:30", 2023, 7, 1)
    assert data.offset() == Duration.of_minutes(330)
    assert not data.is_dst()
    assert data.abbreviation() == "+05:30"
    assert resolve("-0800", 2023, 7, 1).offset() == Duration.of_hours(-8)
    assert resolve("+9:00", 2023, 7, 1).offset() == Duration.of_hours(9)


def test_unknown_zone_resolves_to_utc(log_records) -> None:
    data = resolve("Mars/Olympus", 2023, 7, 1)
    assert data.offset().is_zero()
    assert not data.is_dst()
    assert data.abbreviation() == "UTC"
    assert not TimezoneDatabase.is_known("Mars/Olympus")
    assert any("Mars/Olympus" in rec.msg() for rec in log_records)


def test_is_known() -> None:
    assert TimezoneDatabase.is_known(ZoneId.UTC)
    assert TimezoneDatabase.is_known("Asia/Kathmandu")
    assert TimezoneDatabase.is_known("+01:00")


def test_every_catalog_zone_resolves() -> None:
    at = DateTime.make(2023, 7, 1, 12)
    for id in ZoneId.get_available_zone_ids():
        assert TimezoneDatabase.is_known(id), id
        data = TimezoneDatabase.resolve(id, at)
        assert abs(data.offset_millis()) <= Duration.of_hours(14).ticks()


def test_rule_for() -> None:
    assert TimezoneDatabase.rule_for("America/Chicago") is DstRule.NORTH_AMERICA
    assert TimezoneDatabase.rule_for("Europe/Athens") is DstRule.EUROPE
    assert TimezoneDatabase.rule_for("Australia/Melbourne") is DstRule.SOUTHERN
    assert TimezoneDatabase.rule_for("Australia/Adelaide") is None
    assert TimezoneDatabase.rule_for("Asia/Tehran") is None


def test_transition_days() -> None:
    assert DstTransition(3, 2).day_in(2024) == 10
    assert DstTransition(10, -1).day_in(2024) == 27
    assert DstTransition(11, 1).day_in(2023) == 5
    assert DstTransition(3, -1).date_in(2023) == CalendarDate(2023, 3, 26)


def test_southern_rule_wraps_new_year() -> None:
    rule = DstRule.SOUTHERN
    assert rule.is_southern()
    assert rule.is_active(CalendarDate(2023, 12, 25))
    assert rule.is_active(CalendarDate(2023, 3, 1))
    assert not rule.is_active(CalendarDate(2023, 6, 1))
    assert not DstRule.EUROPE.is_southern()


def test_offset_data_equality() -> None:
    a = TimezoneOffsetData(Duration.of_hours(1), True, "BST")
    b = TimezoneOffsetData(Duration.of_minutes(60), True, "BST")
    assert a == b
    assert hash(a) == hash(b)
    assert a != TimezoneOffsetData(Duration.of_hours(1), False, "BST")
    assert a.to_str() == "+01:00 BST dst"


@pytest.mark.parametrize("at", [None, "2023-07-01T12:00:00", CalendarDate(2023, 7, 1)])
def test_resolve_non_date_time_falls_back_to_utc(at, log_records) -> None:
    data = TimezoneDatabase.resolve(ZoneId.AMERICA_NEW_YORK, at)
    assert data == TimezoneOffsetData(Duration.make(0), False, "UTC")
    assert not TimezoneDatabase.is_dst(ZoneId.AMERICA_NEW_YORK, at)
    assert any("America/New_York" in rec.msg() for rec in log_records)
