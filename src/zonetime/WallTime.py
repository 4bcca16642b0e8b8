#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class WallTime(Obj):
    """WallTime represents a time of day to millisecond precision.

    Arithmetic wraps around midnight and never reports a day carry; use
    DateTime when overflow must roll into the date.
    """

    MS_PER_DAY = 86_400_000

    def __init__(self, hour=0, minute=0, second=0, millisecond=0):
        WallTime._check("hour", hour, 23)
        WallTime._check("minute", minute, 59)
        WallTime._check("second", second, 59)
        WallTime._check("millisecond", millisecond, 999)
        self._hour = hour
        self._min = minute
        self._sec = second
        self._ms = millisecond

    @staticmethod
    def _check(name, val, max_):
        if not isinstance(val, int) or isinstance(val, bool) or val < 0 or val > max_:
            from .Err import ArgErr
            raise ArgErr.make(f"Invalid {name}: {val!r} (0-{max_})")

    @staticmethod
    def make(hour=0, minute=0, second=0, millisecond=0):
        return WallTime(hour, minute, second, millisecond)

    @staticmethod
    def of(hour=0, minute=0, second=0, millisecond=0):
        return WallTime(hour, minute, second, millisecond)

    @staticmethod
    def now(zone=None):
        """Get the current wall clock time in the given zone"""
        from .ZonedDateTime import ZonedDateTime
        return ZonedDateTime.now(zone).time()

    @staticmethod
    def midnight():
        return WallTime._MIDNIGHT

    @staticmethod
    def noon():
        return WallTime._NOON

    @staticmethod
    def from_millis_of_day(ms):
        """Build from milliseconds since midnight, wrapping into one day"""
        ms = ms % WallTime.MS_PER_DAY
        t = WallTime.__new__(WallTime)
        t._hour = ms // 3_600_000
        t._min = (ms // 60_000) % 60
        t._sec = (ms // 1000) % 60
        t._ms = ms % 1000
        return t

    @staticmethod
    def from_duration(d):
        return WallTime.from_millis_of_day(d.ticks())

    def hour(self): return self._hour
    def minute(self): return self._min
    def second(self): return self._sec
    def millisecond(self): return self._ms

    def to_millis_of_day(self):
        return ((self._hour * 60 + self._min) * 60 + self._sec) * 1000 + self._ms

    def to_sec_of_day(self):
        return self.to_millis_of_day() // 1000

    def to_duration(self):
        """Duration since midnight"""
        from .Duration import Duration
        return Duration.make(self.to_millis_of_day())

    def is_midnight(self):
        return self.to_millis_of_day() == 0

    def _fields(self):
        return {
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
            "millisecond": self.millisecond,
            "millis_of_day": self.to_millis_of_day,
        }

    ##########################################################################
    # Arithmetic
    ##########################################################################

    def _plus_millis(self, ms):
        if not isinstance(ms, int) or isinstance(ms, bool):
            from .Err import ArgErr
            raise ArgErr.make(f"Millisecond delta must be an int: {ms!r}")
        if ms == 0:
            return self
        # Python's % is floored, so negative deltas land in the previous day
        return WallTime.from_millis_of_day(self.to_millis_of_day() + ms)

    def plus(self, duration):
        return self._plus_millis(duration.ticks())

    def minus(self, duration):
        return self._plus_millis(-duration.ticks())

    def plus_hours(self, n): return self._plus_millis(n * 3_600_000)
    def plus_minutes(self, n): return self._plus_millis(n * 60_000)
    def plus_seconds(self, n): return self._plus_millis(n * 1000)
    def plus_millis(self, n): return self._plus_millis(n)

    def minus_hours(self, n): return self._plus_millis(-n * 3_600_000)
    def minus_minutes(self, n): return self._plus_millis(-n * 60_000)
    def minus_seconds(self, n): return self._plus_millis(-n * 1000)
    def minus_millis(self, n): return self._plus_millis(-n)

    def __add__(self, other):
        from .Duration import Duration
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        from .Duration import Duration
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def at_date(self, date):
        """Combine with a CalendarDate into a local DateTime"""
        from .DateTime import DateTime
        return DateTime(date, self)

    ##########################################################################
    # Identity
    ##########################################################################

    def equals(self, that):
        if not isinstance(that, WallTime):
            return False
        return self.to_millis_of_day() == that.to_millis_of_day()

    def compare(self, that):
        a = self.to_millis_of_day()
        b = that.to_millis_of_day()
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return self.to_millis_of_day()

    ##########################################################################
    # String
    ##########################################################################

    def to_str(self):
        base = f"{self._hour:02d}:{self._min:02d}:{self._sec:02d}"
        if self._ms != 0:
            base += f".{self._ms:03d}"
        return base

    @staticmethod
    def from_str(s, checked=True):
        """Parse 'HH:mm', 'HH:mm:ss' or 'HH:mm:ss.SSS'.

        Fraction digits are right-padded or truncated to milliseconds, so
        '10:00:00.5' is 500ms and '10:00:00.123456' is 123ms.
        """
        from .Err import Err, ParseErr
        try:
            if not isinstance(s, str):
                raise ParseErr.make_str("WallTime", s)
            parts = s.split(":")
            if len(parts) < 2 or len(parts) > 3:
                raise ParseErr.make_str("WallTime", s)

            frac = "0"
            if len(parts) == 3 and "." in parts[2]:
                parts[2], frac = parts[2].split(".", 1)
                if not frac:
                    raise ParseErr.make_str("WallTime", s)
            for p in parts + [frac]:
                if not p or not p.isdigit() or not p.isascii():
                    raise ParseErr.make_str("WallTime", s)

            hour = int(parts[0])
            minute = int(parts[1])
            second = int(parts[2]) if len(parts) == 3 else 0
            ms = int(frac.ljust(3, "0")[:3])
            return WallTime(hour, minute, second, ms)
        except Err:
            if not checked:
                return None
            raise

    @staticmethod
    def parse(s, checked=True):
        return WallTime.from_str(s, checked)

    ##########################################################################
    # Python interop
    ##########################################################################

    def to_py(self):
        """Convert to native Python datetime.time"""
        from datetime import time as py_time
        return py_time(self._hour, self._min, self._sec, self._ms * 1000)

    @staticmethod
    def from_py(t):
        """Create WallTime from datetime.time; microseconds truncate to millis"""
        return WallTime(t.hour, t.minute, t.second, t.microsecond // 1000)


WallTime._MIDNIGHT = WallTime(0, 0, 0, 0)
WallTime._NOON = WallTime(12, 0, 0, 0)
