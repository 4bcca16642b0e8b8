#
# Weekday - ISO day of week enum, mon=0 through sun=6
#
from .Enum import Enum


class Weekday(Enum):
    """
    Weekday represents a day of the week (enum).
    """

    _vals = None

    _FULL = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

    @staticmethod
    def _make_enum(ordinal, name):
        inst = object.__new__(Weekday)
        inst._ordinal = ordinal
        inst._name = name
        inst._full = Weekday._FULL[ordinal]
        return inst

    @staticmethod
    def vals():
        """Get all weekday values"""
        if Weekday._vals is None:
            names = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
            Weekday._vals = tuple(Weekday._make_enum(i, n) for i, n in enumerate(names))
        return Weekday._vals

    @staticmethod
    def mon():
        return Weekday.vals()[0]

    @staticmethod
    def sun():
        return Weekday.vals()[6]

    @staticmethod
    def of(iso_number):
        """Get weekday by ISO number, Monday=1 through Sunday=7"""
        if not isinstance(iso_number, int) or iso_number < 1 or iso_number > 7:
            from .Err import ArgErr
            raise ArgErr.make(f"Day of week must be between 1 and 7: {iso_number}")
        return Weekday.vals()[iso_number - 1]

    @staticmethod
    def from_str(s, checked=True):
        """Parse Weekday from 'mon' or 'Monday'"""
        return Weekday._lookup(Weekday.vals(), s, checked)

    def iso_number(self):
        return self._ordinal + 1

    def full_name(self):
        return self._full

    def abbr(self):
        return self._full[:3]

    def plus(self, days):
        return Weekday.vals()[(self._ordinal + days) % 7]
