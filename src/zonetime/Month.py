#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Enum import Enum


class Month(Enum):
    """Month of the year, jan=0 through dec=11.

    Names are fixed English; there is no locale lookup.
    """

    _vals = None

    _DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
    _FULL = ("January", "February", "March", "April", "May", "June",
             "July", "August", "September", "October", "November", "December")

    @staticmethod
    def vals():
        """Get tuple of all Month values."""
        if Month._vals is None:
            names = ("jan", "feb", "mar", "apr", "may", "jun",
                     "jul", "aug", "sep", "oct", "nov", "dec")
            Month._vals = tuple(Month._make_month(i, n) for i, n in enumerate(names))
        return Month._vals

    @staticmethod
    def _make_month(ordinal, name):
        m = object.__new__(Month)
        m._ordinal = ordinal
        m._name = name
        m._full = Month._FULL[ordinal]
        return m

    @staticmethod
    def of(number):
        """Get Month by calendar number 1-12."""
        if not isinstance(number, int) or number < 1 or number > 12:
            from .Err import ArgErr
            raise ArgErr.make(f"Month must be between 1 and 12: {number}")
        return Month.vals()[number - 1]

    @staticmethod
    def from_str(s, checked=True):
        """Parse month from 'jan' or 'January'."""
        return Month._lookup(Month.vals(), s, checked)

    @staticmethod
    def is_leap_year(year):
        if (year & 3) != 0:
            return False
        return (year % 100 != 0) or (year % 400 == 0)

    def number(self):
        """Calendar number 1-12."""
        return self._ordinal + 1

    def num_days(self, year):
        """Number of days in this month for the given year."""
        if self._ordinal == 1 and Month.is_leap_year(year):
            return 29
        return Month._DAYS[self._ordinal]

    def quarter(self):
        return self._ordinal // 3 + 1

    def full_name(self):
        return self._full

    def abbr(self):
        return self._full[:3]

    def increment(self):
        return Month.vals()[(self._ordinal + 1) % 12]

    def decrement(self):
        return Month.vals()[(self._ordinal - 1) % 12]
