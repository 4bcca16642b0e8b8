#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import re

from .Obj import Obj


class ZoneId(Obj):
    """ZoneId is a validated zone identifier.

    An id is one of a fixed offset ("+05:00", "-0800"), a short
    abbreviation ("UTC", "EST") or an "Area/City" name.  ZoneId only
    checks that the id is non-empty; resolving it to an offset is the job
    of TimezoneDatabase.  Equality and hash are by exact id string.
    """

    FIXED_OFFSET = re.compile(r"^([+-])(\d{1,2}):?(\d{2})$")

    _cache = {}

    # Catalog of known ids, in listing order
    _CATALOG = (
        # Standard
        "UTC", "GMT", "Z",

        # North American abbreviations
        "EST", "EDT", "CST", "CDT", "MST", "MDT", "PST", "PDT",

        # European abbreviations
        "BST", "CET", "CEST", "EET", "EEST",

        # North America
        "America/New_York", "America/Los_Angeles", "America/Chicago",
        "America/Denver", "America/Phoenix", "America/Anchorage",
        "America/Toronto", "America/Vancouver", "America/Montreal",

        # Central America
        "America/Mexico_City", "America/Guatemala", "America/Belize",
        "America/Costa_Rica", "America/Panama",

        # South America
        "America/Sao_Paulo", "America/Argentina/Buenos_Aires", "America/Lima",
        "America/Bogota", "America/Caracas", "America/Santiago", "America/La_Paz",

        # Caribbean
        "America/Havana", "America/Jamaica", "America/Puerto_Rico",

        # Western Europe
        "Europe/London", "Europe/Dublin", "Europe/Lisbon", "Europe/Reykjavik",

        # Central Europe
        "Europe/Paris", "Europe/Berlin", "Europe/Rome", "Europe/Madrid",
        "Europe/Amsterdam", "Europe/Brussels", "Europe/Vienna", "Europe/Zurich",
        "Europe/Prague", "Europe/Warsaw", "Europe/Stockholm", "Europe/Oslo",
        "Europe/Copenhagen",

        # Eastern Europe
        "Europe/Moscow", "Europe/Istanbul", "Europe/Athens", "Europe/Helsinki",
        "Europe/Kiev", "Europe/Bucharest",

        # Africa
        "Africa/Cairo", "Africa/Lagos", "Africa/Nairobi", "Africa/Johannesburg",
        "Africa/Casablanca", "Africa/Accra", "Africa/Algiers", "Africa/Tunis",
        "Africa/Addis_Ababa", "Africa/Kinshasa",

        # East Asia
        "Asia/Tokyo", "Asia/Shanghai", "Asia/Seoul", "Asia/Hong_Kong", "Asia/Taipei",

        # Southeast Asia
        "Asia/Singapore", "Asia/Manila", "Asia/Bangkok", "Asia/Ho_Chi_Minh",
        "Asia/Jakarta", "Asia/Kuala_Lumpur",

        # South Asia
        "Asia/Kolkata", "Asia/Karachi", "Asia/Dhaka", "Asia/Kathmandu", "Asia/Colombo",

        # Central Asia
        "Asia/Almaty", "Asia/Tashkent", "Asia/Yekaterinburg",

        # Western Asia
        "Asia/Dubai", "Asia/Tehran", "Asia/Baghdad", "Asia/Jerusalem", "Asia/Riyadh",

        # Australia and New Zealand
        "Australia/Sydney", "Australia/Melbourne", "Australia/Brisbane",
        "Australia/Perth", "Australia/Adelaide", "Australia/Darwin",
        "Pacific/Auckland",

        # Pacific islands
        "Pacific/Honolulu", "Pacific/Fiji", "Pacific/Guam", "Pacific/Tahiti",
        "Pacific/Chatham",

        # Antarctica
        "Antarctica/Palmer", "Antarctica/McMurdo",
    )

    def __init__(self, id):
        if not isinstance(id, str) or not id:
            from .Err import ArgErr
            raise ArgErr.make("Zone ID cannot be empty")
        self._id = id

    @staticmethod
    def of(id):
        """Get a ZoneId for the given id; only the empty id is rejected"""
        if isinstance(id, ZoneId):
            return id
        cached = ZoneId._cache.get(id) if isinstance(id, str) else None
        if cached is not None:
            return cached
        zone = ZoneId(id)
        if id in ZoneId._CATALOG:
            ZoneId._cache[id] = zone
        return zone

    @staticmethod
    def from_str(s, checked=True):
        from .Err import ArgErr
        try:
            return ZoneId.of(s)
        except ArgErr:
            if not checked:
                return None
            raise

    @staticmethod
    def of_offset(offset):
        """Fixed-offset id for a Duration, 'UTC' when zero"""
        ms = offset.ticks()
        if ms == 0:
            return ZoneId.UTC
        sign = "-" if ms < 0 else "+"
        mins = abs(ms) // 60_000
        return ZoneId.of(f"{sign}{mins // 60:02d}:{mins % 60:02d}")

    @staticmethod
    def system_default():
        """Zone from the 'defaultZone' config, else the host's current offset"""
        from .Env import Env
        configured = Env.cur().config("defaultZone")
        if configured:
            return ZoneId.of(configured)

        from datetime import datetime
        from .Duration import Duration
        offset = datetime.now().astimezone().utcoffset()
        if offset is None:
            return ZoneId.UTC
        return ZoneId.of_offset(Duration.make(int(offset.total_seconds()) * 1000))

    @staticmethod
    def _configured_default():
        """Zone used when callers pass no zone"""
        from .Env import Env
        return ZoneId.of(Env.cur().config("defaultZone", "UTC"))

    @staticmethod
    def get_available_zone_ids():
        """All catalog ids, deduplicated, in catalog order"""
        return ZoneId._CATALOG

    def id(self):
        return self._id

    def normalized(self):
        """Fold 'GMT', 'UTC' and 'Z' (any case) to 'UTC'"""
        if self._id.upper() in ("GMT", "UTC", "Z"):
            return "UTC"
        return self._id

    def is_fixed_offset(self):
        return ZoneId.FIXED_OFFSET.match(self._id) is not None

    def is_utc(self):
        return self.normalized() == "UTC"

    def equals(self, that):
        return isinstance(that, ZoneId) and self._id == that._id

    def compare(self, that):
        if self._id < that._id:
            return -1
        if self._id > that._id:
            return 1
        return 0

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return hash(self._id)

    def to_str(self):
        return self._id


def _const_name(id):
    return id.upper().replace("/", "_")


# Catalog constants: ZoneId.UTC, ZoneId.AMERICA_NEW_YORK, ...
for _id in ZoneId._CATALOG:
    setattr(ZoneId, _const_name(_id), ZoneId.of(_id))
del _id
