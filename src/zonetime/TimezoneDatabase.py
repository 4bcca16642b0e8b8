#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj
from .Duration import Duration
from .DateTime import DateTime
from .ZoneId import ZoneId


# ========================================================================
# Offset Data
# ========================================================================

class TimezoneOffsetData(Obj):
    """Resolved offset, DST flag and abbreviation for a zone at a local time."""

    def __init__(self, offset, is_dst, abbreviation):
        self._offset = offset
        self._is_dst = is_dst
        self._abbr = abbreviation

    def offset(self):
        """Offset from UTC as a Duration"""
        return self._offset

    def offset_millis(self):
        return self._offset.ticks()

    def is_dst(self):
        return self._is_dst

    def abbreviation(self):
        return self._abbr

    def equals(self, that):
        if not isinstance(that, TimezoneOffsetData):
            return False
        return (self._offset.ticks() == that._offset.ticks() and
                self._is_dst == that._is_dst and
                self._abbr == that._abbr)

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return hash((self._offset.ticks(), self._is_dst, self._abbr))

    def to_str(self):
        dst = " dst" if self._is_dst else ""
        return f"{format_offset(self._offset.ticks())} {self._abbr}{dst}"


# ========================================================================
# DST Rule Classes
# ========================================================================

class DstTransition:
    """A DST transition day such as 'second Sunday of March'.

    Fields:
        month: month 1-12
        week: 1-4 for the nth weekday of the month, -1 for the last
        weekday: ISO weekday 1-7, 7=Sunday
    """

    def __init__(self, month, week, weekday=7):
        self.month = month
        self.week = week
        self.weekday = weekday

    def day_in(self, year):
        """Day of month this transition falls on in the given year."""
        from .CalendarDate import CalendarDate
        if self.week == -1:
            last = CalendarDate.days_in_month(year, self.month)
            dow = CalendarDate(year, self.month, last).day_of_week()
            return last - (dow - self.weekday) % 7
        dow = CalendarDate(year, self.month, 1).day_of_week()
        first = 1 + (self.weekday - dow) % 7
        return first + (self.week - 1) * 7

    def date_in(self, year):
        from .CalendarDate import CalendarDate
        return CalendarDate(year, self.month, self.day_in(year))

    def __repr__(self):
        return f"DstTransition({self.month}, {self.week}, {self.weekday})"


class DstRule:
    """Annual DST window from start (inclusive) to end (exclusive).

    If the end month comes earlier than the start month the window wraps
    the new year, which is DST in the southern hemisphere.
    """

    def __init__(self, start, end):
        self.start = start
        self.end = end

    def is_southern(self):
        return self.end.month < self.start.month

    def is_active(self, date):
        """True if DST is in effect on the given local CalendarDate."""
        start = self.start.date_in(date.year())
        end = self.end.date_in(date.year())
        if self.is_southern():
            return date.compare(start) >= 0 or date.compare(end) < 0
        return date.compare(start) >= 0 and date.compare(end) < 0

    def __repr__(self):
        return f"DstRule({self.start!r}, {self.end!r})"


# Second Sunday of March through the day before the first Sunday of November
DstRule.NORTH_AMERICA = DstRule(DstTransition(3, 2), DstTransition(11, 1))

# Last Sunday of March through the day before the last Sunday of October
DstRule.EUROPE = DstRule(DstTransition(3, -1), DstTransition(10, -1))

# First Sunday of October through the day before the first Sunday of April
DstRule.SOUTHERN = DstRule(DstTransition(10, 1), DstTransition(4, 1))


def format_offset(ms):
    if ms == 0:
        return "Z"
    sign = "-" if ms < 0 else "+"
    mins = abs(ms) // 60_000
    return f"{sign}{mins // 60:02d}:{mins % 60:02d}"


# ========================================================================
# TimezoneDatabase
# ========================================================================

class TimezoneDatabase:
    """Resolves a zone id at a local date-time to its offset and DST state.

    Resolution tries, in order: fixed-offset syntax, the fractional-hour
    table, the whole-hour table, then falls back to UTC.  It never raises.
    DST uses current-era annual rules evaluated on the local month/day, not
    historical transition data.
    """

    # id -> (standard hours, uses DST, DST hours)
    _FRACTIONAL = {
        "Asia/Kolkata": (5.5, False, 5.5),
        "Asia/Tehran": (3.5, True, 4.5),
        "Australia/Adelaide": (9.5, True, 10.5),
        "Australia/Darwin": (9.5, False, 9.5),
        "Asia/Kathmandu": (5.75, False, 5.75),
        "Pacific/Chatham": (12.75, True, 13.75),
    }

    # id -> (standard hours, uses DST, DST hours)
    _WHOLE = {
        "UTC": (0, False, 0),
        "GMT": (0, False, 0),
        "Z": (0, False, 0),

        "EST": (-5, False, -5),
        "EDT": (-4, False, -4),
        "CST": (-6, False, -6),
        "CDT": (-5, False, -5),
        "MST": (-7, False, -7),
        "MDT": (-6, False, -6),
        "PST": (-8, False, -8),
        "PDT": (-7, False, -7),

        "BST": (1, False, 1),
        "CET": (1, False, 1),
        "CEST": (2, False, 2),
        "EET": (2, False, 2),
        "EEST": (3, False, 3),

        "America/New_York": (-5, True, -4),
        "America/Los_Angeles": (-8, True, -7),
        "America/Chicago": (-6, True, -5),
        "America/Denver": (-7, True, -6),
        "America/Phoenix": (-7, False, -7),
        "America/Anchorage": (-9, True, -8),
        "America/Toronto": (-5, True, -4),
        "America/Vancouver": (-8, True, -7),
        "America/Montreal": (-5, True, -4),
        "America/Mexico_City": (-6, True, -5),
        "America/Guatemala": (-6, False, -6),
        "America/Belize": (-6, False, -6),
        "America/Costa_Rica": (-6, False, -6),
        "America/Panama": (-5, False, -5),
        "America/Sao_Paulo": (-3, True, -2),
        "America/Argentina/Buenos_Aires": (-3, False, -3),
        "America/Lima": (-5, False, -5),
        "America/Bogota": (-5, False, -5),
        "America/Caracas": (-4, False, -4),
        "America/Santiago": (-4, True, -3),
        "America/La_Paz": (-4, False, -4),
        "America/Havana": (-5, True, -4),
        "America/Jamaica": (-5, False, -5),
        "America/Puerto_Rico": (-4, False, -4),

        "Europe/London": (0, True, 1),
        "Europe/Dublin": (0, True, 1),
        "Europe/Lisbon": (0, True, 1),
        "Europe/Reykjavik": (0, False, 0),
        "Europe/Paris": (1, True, 2),
        "Europe/Berlin": (1, True, 2),
        "Europe/Rome": (1, True, 2),
        "Europe/Madrid": (1, True, 2),
        "Europe/Amsterdam": (1, True, 2),
        "Europe/Brussels": (1, True, 2),
        "Europe/Vienna": (1, True, 2),
        "Europe/Zurich": (1, True, 2),
        "Europe/Prague": (1, True, 2),
        "Europe/Warsaw": (1, True, 2),
        "Europe/Stockholm": (1, True, 2),
        "Europe/Oslo": (1, True, 2),
        "Europe/Copenhagen": (1, True, 2),
        "Europe/Moscow": (3, False, 3),
        "Europe/Istanbul": (3, False, 3),
        "Europe/Athens": (2, True, 3),
        "Europe/Helsinki": (2, True, 3),
        "Europe/Kiev": (2, True, 3),
        "Europe/Bucharest": (2, True, 3),

        "Africa/Cairo": (2, False, 2),
        "Africa/Lagos": (1, False, 1),
        "Africa/Nairobi": (3, False, 3),
        "Africa/Johannesburg": (2, False, 2),
        "Africa/Casablanca": (1, True, 0),
        "Africa/Accra": (0, False, 0),
        "Africa/Algiers": (1, False, 1),
        "Africa/Tunis": (1, False, 1),
        "Africa/Addis_Ababa": (3, False, 3),
        "Africa/Kinshasa": (1, False, 1),

        "Asia/Tokyo": (9, False, 9),
        "Asia/Shanghai": (8, False, 8),
        "Asia/Seoul": (9, False, 9),
        "Asia/Hong_Kong": (8, False, 8),
        "Asia/Taipei": (8, False, 8),
        "Asia/Singapore": (8, False, 8),
        "Asia/Manila": (8, False, 8),
        "Asia/Bangkok": (7, False, 7),
        "Asia/Ho_Chi_Minh": (7, False, 7),
        "Asia/Jakarta": (7, False, 7),
        "Asia/Kuala_Lumpur": (8, False, 8),
        "Asia/Karachi": (5, False, 5),
        "Asia/Dhaka": (6, False, 6),
        "Asia/Colombo": (5, False, 5),
        "Asia/Almaty": (6, False, 6),
        "Asia/Tashkent": (5, False, 5),
        "Asia/Yekaterinburg": (5, False, 5),
        "Asia/Dubai": (4, False, 4),
        "Asia/Baghdad": (3, False, 3),
        "Asia/Jerusalem": (2, True, 3),
        "Asia/Riyadh": (3, False, 3),

        "Australia/Sydney": (10, True, 11),
        "Australia/Melbourne": (10, True, 11),
        "Australia/Brisbane": (10, False, 10),
        "Australia/Perth": (8, False, 8),
        "Pacific/Auckland": (12, True, 13),

        "Pacific/Honolulu": (-10, False, -10),
        "Pacific/Fiji": (12, True, 13),
        "Pacific/Guam": (10, False, 10),
        "Pacific/Tahiti": (-10, False, -10),

        "Antarctica/Palmer": (-3, True, -2),
        "Antarctica/McMurdo": (12, True, 13),
    }

    # id -> (standard abbreviation, DST abbreviation)
    _ABBRS = {
        "America/New_York": ("EST", "EDT"),
        "America/Chicago": ("CST", "CDT"),
        "America/Denver": ("MST", "MDT"),
        "America/Los_Angeles": ("PST", "PDT"),
        "Europe/London": ("GMT", "BST"),
        "Europe/Paris": ("CET", "CEST"),
        "Europe/Berlin": ("CET", "CEST"),
        "Europe/Rome": ("CET", "CEST"),
        "Australia/Sydney": ("AEST", "AEDT"),
        "Australia/Melbourne": ("AEST", "AEDT"),
        "Asia/Tokyo": ("JST", "JST"),
        "Asia/Shanghai": ("CST", "CST"),
    }

    @staticmethod
    def _log():
        from .Log import Log
        return Log.get("zonetime")

    @staticmethod
    def _id(zone):
        return zone.id() if isinstance(zone, ZoneId) else str(zone)

    @staticmethod
    def resolve(zone, at):
        """Resolve zone (ZoneId or id string) at the local DateTime at.

        Returns TimezoneOffsetData; unknown ids and an at that is not a
        DateTime resolve to UTC.
        """
        id = TimezoneDatabase._id(zone)
        if not isinstance(at, DateTime):
            TimezoneDatabase._log().debug(f"Cannot resolve '{id}' at {at!r}, resolving as UTC")
            return TimezoneOffsetData(Duration.def_val(), False, "UTC")

        m = ZoneId.FIXED_OFFSET.match(id)
        if m is not None:
            sign = -1 if m.group(1) == "-" else 1
            mins = int(m.group(2)) * 60 + int(m.group(3))
            return TimezoneOffsetData(Duration.of_minutes(sign * mins), False, id)

        entry = TimezoneDatabase._FRACTIONAL.get(id)
        if entry is None:
            entry = TimezoneDatabase._WHOLE.get(id)
        if entry is not None:
            std, uses_dst, dst = entry
            is_dst = uses_dst and TimezoneDatabase.is_dst(id, at)
            return TimezoneOffsetData(
                TimezoneDatabase._hours_to_offset(dst if is_dst else std),
                is_dst,
                TimezoneDatabase.abbreviation(id, is_dst))

        TimezoneDatabase._log().debug(f"Unknown zone '{id}', resolving as UTC")
        return TimezoneOffsetData(Duration.def_val(), False, "UTC")

    @staticmethod
    def _hours_to_offset(hours):
        whole = int(hours)
        minutes = int(round((hours - whole) * 60))
        return Duration.of_minutes(whole * 60 + minutes)

    @staticmethod
    def rule_for(zone):
        """DST rule for a zone, or None if it never observes DST"""
        id = TimezoneDatabase._id(zone)
        if id.startswith("America/"):
            return DstRule.NORTH_AMERICA
        if id.startswith("Europe/"):
            return DstRule.EUROPE
        if id.startswith("Australia/") and ("Sydney" in id or "Melbourne" in id):
            return DstRule.SOUTHERN
        return None

    @staticmethod
    def is_dst(zone, at):
        """True if the zone's DST rule is active on at's local date.

        Does not consult whether the zone's table entry uses DST.
        """
        rule = TimezoneDatabase.rule_for(zone)
        if rule is None or not isinstance(at, DateTime):
            return False
        return rule.is_active(at.date())

    @staticmethod
    def abbreviation(zone, is_dst):
        """Abbreviation for the zone in standard or daylight time.

        Zones without a table entry use their own id.
        """
        id = TimezoneDatabase._id(zone)
        pair = TimezoneDatabase._ABBRS.get(id)
        if pair is None:
            return id
        return pair[1] if is_dst else pair[0]

    @staticmethod
    def is_known(zone):
        """True if the zone resolves without falling back to UTC"""
        id = TimezoneDatabase._id(zone)
        return (ZoneId.FIXED_OFFSET.match(id) is not None or
                id in TimezoneDatabase._FRACTIONAL or
                id in TimezoneDatabase._WHOLE)
