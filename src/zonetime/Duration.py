#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Duration(Obj):
    """Duration type - represents a signed span of time in milliseconds"""

    MS_PER_SEC = 1000
    MS_PER_MIN = 60 * MS_PER_SEC
    MS_PER_HOUR = 60 * MS_PER_MIN
    MS_PER_DAY = 24 * MS_PER_HOUR

    _defVal = None

    # Units for to_str/from_str, largest first
    _UNITS = (
        ("day", MS_PER_DAY),
        ("hr", MS_PER_HOUR),
        ("min", MS_PER_MIN),
        ("sec", MS_PER_SEC),
        ("ms", 1),
    )

    def __init__(self, ticks=0):
        if not isinstance(ticks, int) or isinstance(ticks, bool):
            from .Err import ArgErr
            raise ArgErr.make(f"Duration ticks must be an int: {ticks!r}")
        self._ticks = ticks

    @staticmethod
    def def_val():
        if Duration._defVal is None:
            Duration._defVal = Duration(0)
        return Duration._defVal

    @staticmethod
    def make(ticks):
        """Make from milliseconds"""
        if ticks == 0:
            return Duration.def_val()
        return Duration(ticks)

    @staticmethod
    def of_days(n):
        return Duration.make(n * Duration.MS_PER_DAY)

    @staticmethod
    def of_hours(n):
        return Duration.make(n * Duration.MS_PER_HOUR)

    @staticmethod
    def of_minutes(n):
        return Duration.make(n * Duration.MS_PER_MIN)

    @staticmethod
    def of_seconds(n):
        return Duration.make(n * Duration.MS_PER_SEC)

    @staticmethod
    def of_millis(n):
        return Duration.make(n)

    @staticmethod
    def of(hours=0, minutes=0, seconds=0, millis=0, days=0):
        """Make from a mix of units"""
        return Duration.make(days * Duration.MS_PER_DAY +
                             hours * Duration.MS_PER_HOUR +
                             minutes * Duration.MS_PER_MIN +
                             seconds * Duration.MS_PER_SEC +
                             millis)

    @staticmethod
    def from_str(s, checked=True):
        """Parse duration string like '5sec', '3min', '100ms', '0.5hr', '-2day'"""
        try:
            s = s.strip()
            for suffix, unit in Duration._UNITS:
                if s.endswith(suffix):
                    num = s[:-len(suffix)]
                    if not num or num[-1].isalpha():
                        continue
                    return Duration.make(int(round(float(num) * unit)))
            raise ValueError(s)
        except (ValueError, AttributeError):
            if not checked:
                return None
            from .Err import ParseErr
            raise ParseErr.make_str("Duration", s)

    def ticks(self):
        """Get milliseconds"""
        return self._ticks

    def to_millis(self):
        return self._ticks

    def to_sec(self):
        return self._ticks // Duration.MS_PER_SEC

    def to_min(self):
        return self._ticks // Duration.MS_PER_MIN

    def to_hour(self):
        return self._ticks // Duration.MS_PER_HOUR

    def to_day(self):
        return self._ticks // Duration.MS_PER_DAY

    def is_negative(self):
        return self._ticks < 0

    def is_zero(self):
        return self._ticks == 0

    # Arithmetic
    def plus(self, that):
        return Duration.make(self._ticks + that._ticks)

    def minus(self, that):
        return Duration.make(self._ticks - that._ticks)

    def mult(self, scalar):
        """Multiply by int or float"""
        if isinstance(scalar, float):
            return Duration.make(int(self._ticks * scalar))
        return Duration.make(self._ticks * scalar)

    def div(self, scalar):
        """Divide by int or float"""
        if isinstance(scalar, float):
            return Duration.make(int(self._ticks / scalar))
        return Duration.make(self._ticks // scalar)

    def negate(self):
        return Duration.make(-self._ticks)

    def abs(self):
        """Return absolute value"""
        if self._ticks >= 0:
            return self
        return Duration(-self._ticks)

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, scalar):
        return self.mult(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return self.div(scalar)

    def __neg__(self):
        return self.negate()

    # Comparison
    def compare(self, that):
        if that is None:
            return 1
        if self._ticks < that._ticks:
            return -1
        if self._ticks > that._ticks:
            return 1
        return 0

    def equals(self, that):
        return isinstance(that, Duration) and self._ticks == that._ticks

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return hash(self._ticks)

    def to_str(self):
        """Render in the largest unit that divides evenly, e.g. '90min'"""
        if self._ticks == 0:
            return "0ms"
        for suffix, unit in Duration._UNITS:
            if self._ticks % unit == 0:
                return f"{self._ticks // unit}{suffix}"
        return f"{self._ticks}ms"
