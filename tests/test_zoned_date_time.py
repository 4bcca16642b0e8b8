from __future__ import annotations

import datetime
import time

import pytest

from zonetime import ArgErr, DateTime, Duration, ParseErr, ZonedDateTime, ZoneId


NY = ZoneId.AMERICA_NEW_YORK


def test_make_resolves_offset() -> None:
    z = ZonedDateTime.make(2023, 12, 25, 15, zone=NY)
    assert z.offset() == Duration.of_hours(-5)
    assert z.offset_millis() == -18_000_000
    assert z.tz_abbr() == "EST"
    assert not z.is_dst()
    assert z.local_date_time() == DateTime.make(2023, 12, 25, 15)
    assert (z.year(), z.month(), z.day(), z.hour()) == (2023, 12, 25, 15)
    assert z.day_of_week() == 1


def test_make_defaults_to_configured_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    assert ZonedDateTime.make(2023, 1, 1).zone() is ZoneId.UTC
    monkeypatch.setenv("ZONETIME_DEFAULTZONE", "Asia/Tokyo")
    assert ZonedDateTime.make(2023, 1, 1).zone() is ZoneId.ASIA_TOKYO


def test_summer_and_winter_offsets() -> None:
    assert ZonedDateTime.make(2023, 7, 15, 12, zone=NY).offset() == Duration.of_hours(-4)
    assert ZonedDateTime.make(2023, 1, 15, 12, zone=NY).offset() == Duration.of_hours(-5)
    assert ZonedDateTime.make(2023, 3, 12, 2, 30, zone=NY).is_dst()


def test_fractional_and_southern_zones() -> None:
    assert ZonedDateTime.make(2023, 7, 1, 12, zone=ZoneId.AUSTRALIA_ADELAIDE).offset() == Duration.of_minutes(570)
    assert ZonedDateTime.make(2023, 7, 1, 12, zone=ZoneId.AUSTRALIA_SYDNEY).offset() == Duration.of_hours(10)
    assert ZonedDateTime.make(2023, 7, 1, 12, zone=ZoneId.ASIA_TEHRAN).offset() == Duration.of_minutes(210)


def test_parse_same_instant_in_two_forms() -> None:
    a = ZonedDateTime.parse("2023-12-25T15:00:00-05:00[America/New_York]")
    b = ZonedDateTime.parse("2023-12-25T20:00:00Z")
    assert a == b
    assert hash(a) == hash(b)
    assert a.zone() is NY
    assert b.zone() is ZoneId.UTC
    assert a.hour() == 15


def test_parse_zone_precedence() -> None:
    z = ZonedDateTime.parse("2023-06-01T12:00:00+0530")
    assert z.zone().id() == "+0530"
    assert z.offset() == Duration.of_minutes(330)
    assert ZonedDateTime.parse("2023-06-01T12:00:00").zone() is ZoneId.UTC
    assert ZonedDateTime.parse("2023-06-01T12:00:00[Asia/Tokyo]").offset() == Duration.of_hours(9)


def test_parse_errors() -> None:
    with pytest.raises(ParseErr):
        ZonedDateTime.parse("invalid-date")
    with pytest.raises(ParseErr):
        ZonedDateTime.parse("2023-06-01T12:00:00[Asia/Tokyo]x")
    with pytest.raises(ArgErr):
        ZonedDateTime.parse("2023-02-30T10:00:00Z")
    assert ZonedDateTime.parse("invalid-date", checked=False) is None


def test_to_str() -> None:
    z = ZonedDateTime.make(2023, 12, 25, 15, zone=NY)
    assert z.to_str() == "2023-12-25T15:00:00-05:00[America/New_York]"
    assert z.to_str_compact() == "2023-12-25T15:00:00-05:00"
    assert str(ZonedDateTime.make(2023, 12, 25, 20, zone=ZoneId.UTC)) == "2023-12-25T20:00:00Z[UTC]"
    assert ZonedDateTime.make(2023, 1, 1, zone="+05:30").to_str() == "2023-01-01T00:00:00+05:30[+05:30]"


def test_plus_hours_crosses_day() -> None:
    z = ZonedDateTime.make(2023, 12, 25, 15, zone=ZoneId.ASIA_TOKYO).plus_hours(25)
    assert (z.day(), z.hour()) == (26, 16)
    assert z.zone() is ZoneId.ASIA_TOKYO


def test_plus_days_across_dst_keeps_wall_clock() -> None:
    before = ZonedDateTime.make(2023, 3, 11, 12, zone=NY)
    after = before.plus_days(1)
    assert after.hour() == 12
    assert after.offset() == Duration.of_hours(-4)
    assert after - before == Duration.of_hours(23)
    assert after.minus(before) == Duration.of_hours(23)
    assert after.minus(Duration.of_days(1)) == before


def test_instant_round_trip_over_catalog() -> None:
    ms = ZonedDateTime.parse("2023-07-04T16:20:00.125Z").to_epoch_milli()
    for id in ZoneId.get_available_zone_ids():
        z = ZonedDateTime.from_epoch_milli(ms, id)
        assert z.to_epoch_milli() == ms, id
        assert z.zone().id() == id


def test_with_zone_same_instant_over_catalog() -> None:
    origin = ZonedDateTime.make(2023, 11, 5, 1, 30, zone=NY)
    for id in ZoneId.get_available_zone_ids():
        moved = origin.with_zone_same_instant(id)
        assert moved.to_epoch_milli() == origin.to_epoch_milli(), id
        assert moved == origin


def test_with_zone_same_instant_same_zone_is_identity() -> None:
    z = ZonedDateTime.make(2023, 6, 1, zone=NY)
    assert z.with_zone_same_instant(NY) is z


def test_with_zone_same_local_moves_instant() -> None:
    ny = ZonedDateTime.make(2023, 12, 25, 15, zone=NY)
    tokyo = ny.with_zone_same_local(ZoneId.ASIA_TOKYO)
    assert tokyo.local_date_time() == ny.local_date_time()
    assert ny - tokyo == Duration.of_hours(14)


def test_to_utc() -> None:
    utc = ZonedDateTime.make(2023, 12, 25, 15, zone=NY).to_utc()
    assert utc.zone() is ZoneId.UTC
    assert utc.local_date_time() == DateTime.make(2023, 12, 25, 20)
    assert utc.tz_abbr() == "UTC"


def test_from_epoch_milli_around_fall_back() -> None:
    start = DateTime.make(2023, 11, 5, 2).to_epoch_milli()
    for i in range(16):
        ms = start + i * 15 * 60_000
        assert ZonedDateTime.from_epoch_milli(ms, NY).to_epoch_milli() == ms


def test_from_epoch_milli_prefers_consistent_offset() -> None:
    z = ZonedDateTime.from_epoch_milli(DateTime.make(2023, 11, 5, 3, 30).to_epoch_milli(), NY)
    assert z.local_date_time() == DateTime.make(2023, 11, 4, 23, 30)
    assert z.is_dst()


def test_from_epoch_milli_repeated_hour_logged(log_records) -> None:
    ms = DateTime.make(2023, 11, 5, 4, 30).to_epoch_milli()
    z = ZonedDateTime.from_epoch_milli(ms, NY)
    assert z.to_epoch_milli() == ms
    assert z.offset() == Duration.of_hours(-5)
    assert any(rec.msg().startswith("Repeated local time") for rec in log_records)


def test_ordering_by_instant() -> None:
    a = ZonedDateTime.make(2023, 1, 1, 12, zone=ZoneId.ASIA_TOKYO)
    b = ZonedDateTime.make(2023, 1, 1, 12, zone=ZoneId.UTC)
    c = ZonedDateTime.make(2023, 1, 1, 12, zone=NY)
    assert sorted([c, b, a]) == [a, b, c]
    assert a.is_before(b)
    assert len({b, b.with_zone_same_instant(NY)}) == 1


def test_now() -> None:
    now = ZonedDateTime.now(ZoneId.UTC)
    assert abs(now.to_epoch_milli() - int(time.time() * 1000)) < 5000
    assert ZonedDateTime.now(ZoneId.ASIA_TOKYO).zone() is ZoneId.ASIA_TOKYO


def test_now_uses_configured_zone(config_props) -> None:
    config_props("defaultZone=Europe/Berlin\n")
    assert ZonedDateTime.now().zone() is ZoneId.EUROPE_BERLIN


def test_fields() -> None:
    z = ZonedDateTime.make(2023, 12, 25, 15, zone=NY)
    assert z.get("offset_millis") == -18_000_000
    assert z.get("epoch_milli") == z.to_epoch_milli()
    assert z.get("hour") == 15


def test_py_interop() -> None:
    z = ZonedDateTime.make(2023, 7, 4, 12, zone=NY)
    py = z.to_py()
    assert py.utcoffset() == datetime.timedelta(hours=-4)
    assert py.hour == 12

    aware = datetime.datetime(2023, 12, 25, 15, tzinfo=datetime.timezone(datetime.timedelta(hours=-5)))
    back = ZonedDateTime.from_py(aware)
    assert back.zone().id() == "-05:00"
    assert back == ZonedDateTime.parse("2023-12-25T20:00:00Z")
    assert ZonedDateTime.from_py(aware, NY).hour() == 15

    naive = ZonedDateTime.from_py(datetime.datetime(2023, 1, 1, 9), ZoneId.ASIA_TOKYO)
    assert naive.offset() == Duration.of_hours(9)
    assert naive.hour() == 9
