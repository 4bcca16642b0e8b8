#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

from .Obj import Obj


class Enum(Obj):
    """
    Base class for the Month and Weekday enums.
    """

    def __init__(self, ordinal=0, name=""):
        self._ordinal = ordinal
        self._name = name

    def ordinal(self):
        """Return ordinal value"""
        return self._ordinal

    def name(self):
        """Return enum name"""
        return self._name

    def to_str(self):
        """Return string representation (the name)"""
        return self._name

    def equals(self, other):
        """Enums are singletons - use identity comparison"""
        return self is other

    def compare(self, other):
        """Compare by ordinal"""
        return self._ordinal - other._ordinal

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash((type(self).__name__, self._ordinal))

    @classmethod
    def _lookup(cls, vals, s, checked):
        """Shared from_str: match name or full name, case-insensitive"""
        key = s.lower() if isinstance(s, str) else None
        for v in vals:
            if key == v._name or key == v._full.lower():
                return v
        if checked:
            from .Err import ParseErr
            raise ParseErr.make(f"Unknown {cls.__name__}: {s}")
        return None
