#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import re

from .Obj import Obj
from .DateTime import DateTime
from .Duration import Duration
from .ZoneId import ZoneId
from .TimezoneDatabase import TimezoneDatabase, TimezoneOffsetData, format_offset


class ZonedDateTime(Obj):
    """ZonedDateTime is a local DateTime in a zone with its resolved offset.

    The offset and DST flag are derived from the (local, zone) pair by
    TimezoneDatabase whenever an instance is built, so every operation that
    changes the local value or the zone goes back through resolution.
    Equality, ordering and hash use the UTC instant only: two values with
    different zones that name the same instant are equal.
    """

    _BRACKET = re.compile(r"\[([^\]]+)\]$")
    _OFFSET = re.compile(r"([+-]\d{2}:?\d{2}|Z)$")

    def __init__(self, local, zone):
        zone = ZoneId.of(zone)
        data = TimezoneDatabase.resolve(zone, local)
        self._init(local, zone, data)

    def _init(self, local, zone, data):
        self._local = local
        self._zone = zone
        self._offset = data.offset()
        self._is_dst = data.is_dst()
        self._abbr = data.abbreviation()

    @staticmethod
    def _make(local, zone, data):
        inst = ZonedDateTime.__new__(ZonedDateTime)
        inst._init(local, zone, data)
        return inst

    ##########################################################################
    # Factories
    ##########################################################################

    @staticmethod
    def of(local, zone):
        """Attach zone to local, resolving the offset for that local value"""
        return ZonedDateTime(local, zone)

    @staticmethod
    def make(year, month, day, hour=0, minute=0, second=0, millisecond=0, zone=None):
        if zone is None:
            zone = ZoneId._configured_default()
        return ZonedDateTime(DateTime.make(year, month, day, hour, minute, second, millisecond), zone)

    @staticmethod
    def now(zone=None):
        """Current instant as read on the wall clock of zone"""
        import time
        return ZonedDateTime.from_epoch_milli(time.time_ns() // 1_000_000, zone)

    @staticmethod
    def from_epoch_milli(ms, zone=None):
        """Instant ms since 1970-01-01T00:00Z viewed in zone"""
        if zone is None:
            zone = ZoneId._configured_default()
        return ZonedDateTime._from_instant(ms, ZoneId.of(zone))

    @staticmethod
    def _from_instant(ms, zone):
        utc = DateTime.from_epoch_milli(ms)
        if zone.equals(ZoneId.UTC):
            return ZonedDateTime._make(utc, zone, TimezoneOffsetData(Duration.def_val(), False, "UTC"))

        # First guess comes from the UTC reading and must agree with the
        # offset resolved at the shifted local value
        data = TimezoneDatabase.resolve(zone, utc)
        local = utc.plus(data.offset())
        check = TimezoneDatabase.resolve(zone, local)
        if check.offset_millis() == data.offset_millis():
            return ZonedDateTime._make(local, zone, check)

        shifted = utc.plus(check.offset())
        recheck = TimezoneDatabase.resolve(zone, shifted)
        if recheck.offset_millis() == check.offset_millis():
            return ZonedDateTime._make(shifted, zone, recheck)

        # Repeated wall-clock hour: neither local reading resolves back to
        # its own offset, so keep the first one which still names ms
        TimezoneDatabase._log().debug(
            f"Repeated local time in {zone}: keeping {format_offset(data.offset_millis())} for {local}")
        return ZonedDateTime._make(local, zone, data)

    @staticmethod
    def from_str(s, checked=True):
        """Parse '<DateTime>[<offset>][[<zone>]]'.

        The zone is the bracketed id if present, else the offset ('Z' is
        UTC), else UTC.
        """
        from .Err import Err, ParseErr
        try:
            if not isinstance(s, str):
                raise ParseErr.make_str("ZonedDateTime", s)
            rest = s
            zone_part = None
            offset_part = None

            m = ZonedDateTime._BRACKET.search(rest)
            if m is not None:
                zone_part = m.group(1)
                rest = rest[:m.start()]

            m = ZonedDateTime._OFFSET.search(rest)
            if m is not None:
                offset_part = m.group(1)
                rest = rest[:m.start()]

            local = DateTime.from_str(rest)

            if zone_part is not None:
                zone = ZoneId.of(zone_part)
            elif offset_part is not None:
                zone = ZoneId.UTC if offset_part == "Z" else ZoneId.of(offset_part)
            else:
                zone = ZoneId.UTC
            return ZonedDateTime(local, zone)
        except Err:
            if not checked:
                return None
            raise

    @staticmethod
    def parse(s, checked=True):
        return ZonedDateTime.from_str(s, checked)

    ##########################################################################
    # Accessors
    ##########################################################################

    def local_date_time(self): return self._local
    def date(self): return self._local.date()
    def time(self): return self._local.time()
    def zone(self): return self._zone
    def offset(self): return self._offset
    def offset_millis(self): return self._offset.ticks()
    def is_dst(self): return self._is_dst
    def tz_abbr(self): return self._abbr

    def year(self): return self._local.year()
    def month(self): return self._local.month()
    def day(self): return self._local.day()
    def hour(self): return self._local.hour()
    def minute(self): return self._local.minute()
    def second(self): return self._local.second()
    def millisecond(self): return self._local.millisecond()
    def day_of_week(self): return self._local.day_of_week()
    def day_of_year(self): return self._local.day_of_year()
    def weekday(self): return self._local.weekday()

    def to_epoch_milli(self):
        """UTC instant (local minus offset) as epoch milliseconds"""
        return self._local.to_epoch_milli() - self._offset.ticks()

    def _fields(self):
        fields = dict(self._local._fields())
        fields["offset_millis"] = self.offset_millis
        fields["epoch_milli"] = self.to_epoch_milli
        return fields

    ##########################################################################
    # Arithmetic
    ##########################################################################

    def _with_local(self, local):
        if local is self._local:
            return self
        return ZonedDateTime(local, self._zone)

    def plus(self, duration):
        """Add duration to the local value and re-resolve the offset"""
        return self._with_local(self._local.plus(duration))

    def plus_days(self, n): return self._with_local(self._local.plus_days(n))
    def plus_weeks(self, n): return self._with_local(self._local.plus_weeks(n))
    def plus_months(self, n): return self._with_local(self._local.plus_months(n))
    def plus_years(self, n): return self._with_local(self._local.plus_years(n))
    def plus_hours(self, n): return self._with_local(self._local.plus_hours(n))
    def plus_minutes(self, n): return self._with_local(self._local.plus_minutes(n))
    def plus_seconds(self, n): return self._with_local(self._local.plus_seconds(n))
    def plus_millis(self, n): return self._with_local(self._local.plus_millis(n))

    def minus_days(self, n): return self._with_local(self._local.minus_days(n))
    def minus_weeks(self, n): return self._with_local(self._local.minus_weeks(n))
    def minus_months(self, n): return self._with_local(self._local.minus_months(n))
    def minus_years(self, n): return self._with_local(self._local.minus_years(n))
    def minus_hours(self, n): return self._with_local(self._local.minus_hours(n))
    def minus_minutes(self, n): return self._with_local(self._local.minus_minutes(n))
    def minus_seconds(self, n): return self._with_local(self._local.minus_seconds(n))
    def minus_millis(self, n): return self._with_local(self._local.minus_millis(n))

    def minus(self, that):
        """Subtract a Duration, or get the Duration since another ZonedDateTime"""
        if isinstance(that, ZonedDateTime):
            return self.minus_date_time(that)
        return self._with_local(self._local.minus(that))

    def minus_date_time(self, that):
        """Elapsed Duration from that instant to this one"""
        return Duration.make(self.to_epoch_milli() - that.to_epoch_milli())

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, (Duration, ZonedDateTime)):
            return NotImplemented
        return self.minus(other)

    ##########################################################################
    # Zone conversion
    ##########################################################################

    def with_zone_same_instant(self, zone):
        """Same instant on another zone's wall clock"""
        zone = ZoneId.of(zone)
        if zone.equals(self._zone):
            return self
        return ZonedDateTime._from_instant(self.to_epoch_milli(), zone)

    def with_zone_same_local(self, zone):
        """Same wall clock reading in another zone; the instant moves"""
        return ZonedDateTime(self._local, zone)

    def to_utc(self):
        return self.with_zone_same_instant(ZoneId.UTC)

    ##########################################################################
    # Identity
    ##########################################################################

    def equals(self, that):
        if not isinstance(that, ZonedDateTime):
            return False
        return self.to_epoch_milli() == that.to_epoch_milli()

    def compare(self, that):
        a = self.to_epoch_milli()
        b = that.to_epoch_milli()
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return hash(self.to_epoch_milli())

    ##########################################################################
    # String
    ##########################################################################

    def to_str(self):
        return f"{self.to_str_compact()}[{self._zone.id()}]"

    def to_str_compact(self):
        """ISO form without the bracketed zone id"""
        return f"{self._local.to_str()}{format_offset(self._offset.ticks())}"

    ##########################################################################
    # Python interop
    ##########################################################################

    def to_py(self):
        """Convert to an aware datetime.datetime with a fixed-offset tzinfo"""
        from datetime import timedelta, timezone
        return self._local.to_py().replace(
            tzinfo=timezone(timedelta(milliseconds=self._offset.ticks())))

    @staticmethod
    def from_py(dt, zone=None):
        """Create from datetime.datetime.

        Aware values keep their instant and default to their own fixed
        offset as zone; naive values are taken as local time in zone.
        """
        from datetime import datetime, timedelta, timezone
        offset = dt.utcoffset()
        if offset is None:
            if zone is None:
                zone = ZoneId._configured_default()
            return ZonedDateTime(DateTime.from_py(dt), zone)

        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        ms = (dt - epoch) // timedelta(milliseconds=1)
        if zone is None:
            zone = ZoneId.of_offset(Duration.make(offset // timedelta(milliseconds=1)))
        return ZonedDateTime.from_epoch_milli(ms, zone)

