#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

class Obj:
    """Base class for all zonetime value types"""

    def equals(self, that):
        return self is that

    def compare(self, that):
        """Compare this object to that for ordering.

        Default implementation checks equals() first, then uses string representation.
        Subclasses override for value ordering.
        Returns -1 if this < that, 0 if equal, 1 if this > that.
        """
        if self is that:
            return 0
        if that is None:
            return 1
        if self.equals(that):
            return 0
        my_str = self.to_str()
        that_str = that.to_str() if isinstance(that, Obj) else str(that)
        if my_str < that_str:
            return -1
        if my_str > that_str:
            return 1
        return 0

    def __lt__(self, other):
        """Python < operator - delegates to compare()"""
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        """Python <= operator - delegates to compare()"""
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        """Python > operator - delegates to compare()"""
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        """Python >= operator - delegates to compare()"""
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare(other) >= 0

    def is_before(self, that):
        """Return true if this sorts before that"""
        return self.compare(that) < 0

    def is_after(self, that):
        """Return true if this sorts after that"""
        return self.compare(that) > 0

    def is_equal(self, that):
        """Return true if this and that compare as equal"""
        return self.compare(that) == 0

    def to_str(self):
        return f"{type(self).__name__}@{id(self):x}"

    def __str__(self):
        return self.to_str()

    def __repr__(self):
        return f'{type(self).__name__}("{self.to_str()}")'

    def get(self, field):
        """Look up a named field; subclasses list the fields they carry."""
        from .Err import ArgErr, UnsupportedErr
        fields = self._fields()
        if field in fields:
            return fields[field]()
        if field not in Obj._FIELD_NAMES:
            raise ArgErr.make(f"Unknown field: {field}")
        raise UnsupportedErr.make(f"{type(self).__name__} does not support field: {field}")

    def is_supported(self, field):
        """Return true if get(field) would succeed"""
        return field in self._fields()

    def _fields(self):
        return {}

    # Every field name any value type may carry
    _FIELD_NAMES = (
        "year", "month", "day", "day_of_week", "day_of_year",
        "hour", "minute", "second", "millisecond", "millis_of_day",
        "offset_millis", "epoch_milli", "epoch_day",
    )
