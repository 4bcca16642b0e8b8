#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj
from .CalendarDate import CalendarDate
from .WallTime import WallTime


class DateTime(Obj):
    """DateTime is a local date and time of day with no zone.

    Date-only deltas (days, weeks, months, years) act on the date and keep
    the time.  Sub-day deltas go through epoch milliseconds so that overflow
    carries into the date.
    """

    MS_PER_DAY = 86_400_000

    def __init__(self, date, time):
        if not isinstance(date, CalendarDate) or not isinstance(time, WallTime):
            from .Err import ArgErr
            raise ArgErr.make(f"DateTime requires CalendarDate and WallTime: {date!r}, {time!r}")
        self._date = date
        self._time = time

    @staticmethod
    def make(year, month, day, hour=0, minute=0, second=0, millisecond=0):
        return DateTime(CalendarDate(year, month, day),
                        WallTime(hour, minute, second, millisecond))

    @staticmethod
    def of(date, time):
        return DateTime(date, time)

    @staticmethod
    def now(zone=None):
        """Current local date-time as read on the wall clock of zone"""
        from .ZonedDateTime import ZonedDateTime
        return ZonedDateTime.now(zone).local_date_time()

    @staticmethod
    def from_epoch_milli(ms):
        """Build the local value whose UTC reading is ms since the epoch"""
        day, rem = divmod(ms, DateTime.MS_PER_DAY)
        return DateTime(CalendarDate.from_epoch_day(day), WallTime.from_millis_of_day(rem))

    def to_epoch_milli(self):
        """Epoch milliseconds treating this local value as UTC"""
        return self._date.to_epoch_day() * DateTime.MS_PER_DAY + self._time.to_millis_of_day()

    ##########################################################################
    # Accessors
    ##########################################################################

    def date(self): return self._date
    def time(self): return self._time

    def year(self): return self._date.year()
    def month(self): return self._date.month()
    def day(self): return self._date.day()
    def hour(self): return self._time.hour()
    def minute(self): return self._time.minute()
    def second(self): return self._time.second()
    def millisecond(self): return self._time.millisecond()

    def day_of_week(self): return self._date.day_of_week()
    def day_of_year(self): return self._date.day_of_year()
    def weekday(self): return self._date.weekday()

    def _fields(self):
        fields = dict(self._date._fields())
        fields.update(self._time._fields())
        return fields

    def with_date(self, date):
        return DateTime(date, self._time)

    def with_time(self, time):
        return DateTime(self._date, time)

    def at_zone(self, zone):
        """Attach a zone, resolving its offset for this local value"""
        from .ZonedDateTime import ZonedDateTime
        return ZonedDateTime.of(self, zone)

    ##########################################################################
    # Arithmetic
    ##########################################################################

    def _with_date(self, date):
        if date is self._date:
            return self
        return DateTime(date, self._time)

    def plus_days(self, n): return self._with_date(self._date.plus_days(n))
    def plus_weeks(self, n): return self._with_date(self._date.plus_weeks(n))
    def plus_months(self, n): return self._with_date(self._date.plus_months(n))
    def plus_years(self, n): return self._with_date(self._date.plus_years(n))

    def minus_days(self, n): return self._with_date(self._date.minus_days(n))
    def minus_weeks(self, n): return self._with_date(self._date.minus_weeks(n))
    def minus_months(self, n): return self._with_date(self._date.minus_months(n))
    def minus_years(self, n): return self._with_date(self._date.minus_years(n))

    def _plus_millis(self, ms):
        if not isinstance(ms, int) or isinstance(ms, bool):
            from .Err import ArgErr
            raise ArgErr.make(f"Millisecond delta must be an int: {ms!r}")
        if ms == 0:
            return self
        return DateTime.from_epoch_milli(self.to_epoch_milli() + ms)

    def plus_hours(self, n): return self._plus_millis(n * 3_600_000)
    def plus_minutes(self, n): return self._plus_millis(n * 60_000)
    def plus_seconds(self, n): return self._plus_millis(n * 1000)
    def plus_millis(self, n): return self._plus_millis(n)

    def minus_hours(self, n): return self._plus_millis(-n * 3_600_000)
    def minus_minutes(self, n): return self._plus_millis(-n * 60_000)
    def minus_seconds(self, n): return self._plus_millis(-n * 1000)
    def minus_millis(self, n): return self._plus_millis(-n)

    def plus(self, duration):
        """Add an arbitrary Duration, carrying into the date"""
        return self._plus_millis(duration.ticks())

    def minus(self, duration):
        return self._plus_millis(-duration.ticks())

    def minus_date_time(self, that):
        """Duration from that to this"""
        from .Duration import Duration
        return Duration.make(self.to_epoch_milli() - that.to_epoch_milli())

    def __add__(self, other):
        from .Duration import Duration
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        from .Duration import Duration
        if isinstance(other, DateTime):
            return self.minus_date_time(other)
        if isinstance(other, Duration):
            return self.minus(other)
        return NotImplemented

    ##########################################################################
    # Identity
    ##########################################################################

    def equals(self, that):
        if not isinstance(that, DateTime):
            return False
        return self._date.equals(that._date) and self._time.equals(that._time)

    def compare(self, that):
        c = self._date.compare(that._date)
        if c != 0:
            return c
        return self._time.compare(that._time)

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return hash((hash(self._date), hash(self._time)))

    ##########################################################################
    # String
    ##########################################################################

    def to_str(self):
        return f"{self._date.to_str()}T{self._time.to_str()}"

    @staticmethod
    def from_str(s, checked=True):
        """Parse 'YYYY-MM-DDTHH:mm[:ss[.SSS]]'"""
        from .Err import Err, ParseErr
        try:
            if not isinstance(s, str):
                raise ParseErr.make_str("DateTime", s)
            parts = s.split("T")
            if len(parts) != 2:
                raise ParseErr.make_str("DateTime", s)
            return DateTime(CalendarDate.from_str(parts[0]), WallTime.from_str(parts[1]))
        except Err:
            if not checked:
                return None
            raise

    @staticmethod
    def parse(s, checked=True):
        return DateTime.from_str(s, checked)

    ##########################################################################
    # Python interop
    ##########################################################################

    def to_py(self):
        """Convert to a naive Python datetime.datetime"""
        from datetime import datetime as py_datetime
        return py_datetime(self.year(), self.month(), self.day(),
                           self.hour(), self.minute(), self.second(),
                           self.millisecond() * 1000)

    @staticmethod
    def from_py(dt):
        """Create from datetime.datetime; any tzinfo is ignored"""
        return DateTime(CalendarDate(dt.year, dt.month, dt.day),
                        WallTime(dt.hour, dt.minute, dt.second, dt.microsecond // 1000))
