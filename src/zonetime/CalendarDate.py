#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import re

from .Obj import Obj
from .Month import Month


class CalendarDate(Obj):
    """CalendarDate represents a Gregorian day without time-of-day or zone.

    Instances are immutable and always valid: the constructor rejects a
    month outside 1-12 or a day past the end of its month with ArgErr.
    """

    _PATTERN = re.compile(r"^(-?\d{4,})-(\d{2})-(\d{2})$")

    # Days from 0000-03-01 to 1970-01-01
    _DAYS_0000_TO_1970 = 719468

    def __init__(self, year, month, day):
        if isinstance(month, Month):
            month = month.number()
        for name, val in (("year", year), ("month", month), ("day", day)):
            if not isinstance(val, int) or isinstance(val, bool):
                from .Err import ArgErr
                raise ArgErr.make(f"CalendarDate {name} must be an int: {val!r}")
        if month < 1 or month > 12:
            from .Err import ArgErr
            raise ArgErr.make(f"Invalid month: {month}")
        last = CalendarDate.days_in_month(year, month)
        if day < 1 or day > last:
            from .Err import ArgErr
            raise ArgErr.make(f"Invalid day {day} for {year}-{month:02d} (1-{last})")
        self._year = year
        self._month = month
        self._day = day

    @staticmethod
    def make(year, month, day):
        return CalendarDate(year, month, day)

    @staticmethod
    def of(year, month, day):
        return CalendarDate(year, month, day)

    @staticmethod
    def today(zone=None):
        """Get the current date in the given zone (configured default when None)"""
        from .ZonedDateTime import ZonedDateTime
        return ZonedDateTime.now(zone).date()

    @staticmethod
    def _trusted(year, month, day):
        d = CalendarDate.__new__(CalendarDate)
        d._year = year
        d._month = month
        d._day = day
        return d

    ##########################################################################
    # Calendar rules
    ##########################################################################

    @staticmethod
    def is_leap_year(year):
        return Month.is_leap_year(year)

    @staticmethod
    def days_in_month(year, month):
        """Length of month 1-12 in the given year"""
        return Month.of(month).num_days(year)

    ##########################################################################
    # Accessors
    ##########################################################################

    def year(self): return self._year
    def month(self): return self._month
    def day(self): return self._day

    def month_of_year(self):
        """Get the Month enum"""
        return Month.of(self._month)

    def is_leap(self):
        return Month.is_leap_year(self._year)

    def length_of_month(self):
        return CalendarDate.days_in_month(self._year, self._month)

    def length_of_year(self):
        return 366 if self.is_leap() else 365

    def day_of_week(self):
        """ISO day of week, Monday=1 through Sunday=7"""
        # 1970-01-01 was a Thursday
        return (self.to_epoch_day() + 3) % 7 + 1

    def weekday(self):
        from .Weekday import Weekday
        return Weekday.of(self.day_of_week())

    def day_of_year(self):
        days = self._day
        for m in range(1, self._month):
            days += CalendarDate.days_in_month(self._year, m)
        return days

    def _fields(self):
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "day_of_week": self.day_of_week,
            "day_of_year": self.day_of_year,
            "epoch_day": self.to_epoch_day,
        }

    ##########################################################################
    # Epoch day
    ##########################################################################

    def to_epoch_day(self):
        """Days since 1970-01-01 (negative before)"""
        y = self._year
        m = self._month
        if m <= 2:
            y -= 1
        era = y // 400
        yoe = y - era * 400
        mp = (m + 9) % 12
        doy = (153 * mp + 2) // 5 + self._day - 1
        doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
        return era * 146097 + doe - CalendarDate._DAYS_0000_TO_1970

    @staticmethod
    def from_epoch_day(n):
        """Inverse of to_epoch_day"""
        z = n + CalendarDate._DAYS_0000_TO_1970
        era = z // 146097
        doe = z - era * 146097
        yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
        doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
        mp = (5 * doy + 2) // 153
        day = doy - (153 * mp + 2) // 5 + 1
        month = mp + 3 if mp < 10 else mp - 9
        year = yoe + era * 400 + (1 if month <= 2 else 0)
        return CalendarDate._trusted(year, month, day)

    ##########################################################################
    # Arithmetic
    ##########################################################################

    def plus_days(self, n):
        if not isinstance(n, int) or isinstance(n, bool):
            from .Err import ArgErr
            raise ArgErr.make(f"Day count must be an int: {n!r}")
        if n == 0:
            return self
        return CalendarDate.from_epoch_day(self.to_epoch_day() + n)

    def minus_days(self, n):
        return self.plus_days(-n)

    def plus_weeks(self, n):
        return self.plus_days(n * 7)

    def minus_weeks(self, n):
        return self.plus_days(-n * 7)

    def plus_months(self, n):
        """Add months, clamping the day to the target month's length"""
        if n == 0:
            return self
        total = self._year * 12 + (self._month - 1) + n
        year = total // 12
        month = total % 12 + 1
        day = min(self._day, CalendarDate.days_in_month(year, month))
        return CalendarDate(year, month, day)

    def minus_months(self, n):
        return self.plus_months(-n)

    def plus_years(self, n):
        """Add years; Feb 29 becomes Feb 28 in a non-leap target year"""
        if n == 0:
            return self
        year = self._year + n
        day = self._day
        if self._month == 2 and day == 29 and not Month.is_leap_year(year):
            day = 28
        return CalendarDate(year, self._month, day)

    def minus_years(self, n):
        return self.plus_years(-n)

    def plus(self, duration):
        """Add duration, which must be a whole number of days"""
        from .Duration import Duration
        if duration.ticks() % Duration.MS_PER_DAY != 0:
            from .Err import ArgErr
            raise ArgErr.make(f"Duration must be whole days: {duration}")
        return self.plus_days(duration.ticks() // Duration.MS_PER_DAY)

    def minus(self, duration):
        return self.plus(duration.negate())

    def minus_date(self, that):
        """Return the delta between this and that date as a Duration of days"""
        from .Duration import Duration
        return Duration.of_days(self.to_epoch_day() - that.to_epoch_day())

    def __add__(self, other):
        from .Duration import Duration
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other):
        from .Duration import Duration
        if isinstance(other, CalendarDate):
            return self.minus_date(other)
        if isinstance(other, Duration):
            return self.minus(other)
        return NotImplemented

    def first_of_month(self):
        if self._day == 1:
            return self
        return CalendarDate._trusted(self._year, self._month, 1)

    def last_of_month(self):
        last = self.length_of_month()
        if self._day == last:
            return self
        return CalendarDate._trusted(self._year, self._month, last)

    def at_time(self, time):
        """Combine with a WallTime into a local DateTime"""
        from .DateTime import DateTime
        return DateTime(self, time)

    ##########################################################################
    # Identity
    ##########################################################################

    def equals(self, that):
        if not isinstance(that, CalendarDate):
            return False
        return (self._year == that._year and
                self._month == that._month and
                self._day == that._day)

    def compare(self, that):
        a = (self._year, self._month, self._day)
        b = (that._year, that._month, that._day)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def __eq__(self, other):
        return self.equals(other)

    def __hash__(self):
        return (self._year << 9) ^ (self._month << 5) ^ self._day

    ##########################################################################
    # String
    ##########################################################################

    @staticmethod
    def _year_str(year):
        """Four digit year with the sign outside the padding"""
        if year < 0:
            return f"-{-year:04d}"
        return f"{year:04d}"

    def to_str(self):
        year = CalendarDate._year_str(self._year)
        return f"{year}-{self._month:02d}-{self._day:02d}"

    @staticmethod
    def from_str(s, checked=True):
        """Parse date from YYYY-MM-DD string"""
        from .Err import Err, ParseErr
        try:
            m = CalendarDate._PATTERN.match(s) if isinstance(s, str) else None
            if m is None:
                raise ParseErr.make_str("CalendarDate", s)
            return CalendarDate(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        except Err:
            if not checked:
                return None
            raise

    @staticmethod
    def parse(s, checked=True):
        return CalendarDate.from_str(s, checked)

    ##########################################################################
    # Python interop
    ##########################################################################

    def to_py(self):
        """Convert to native Python datetime.date.

        Example:
            >>> CalendarDate(2025, 1, 21).to_py()
            datetime.date(2025, 1, 21)
        """
        from datetime import date as py_date
        return py_date(self._year, self._month, self._day)

    @staticmethod
    def from_py(d):
        """Create CalendarDate from native Python datetime.date"""
        return CalendarDate(d.year, d.month, d.day)
