#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import re

from .Obj import Obj
from .Month import Month
from .Weekday import Weekday


class DateTimeFormatter(Obj):
    """Pattern based formatting and parsing with fixed English names.

    Pattern letters:

        yyyy  four digit year          yy    two digit year
        MMMM  full month name          MMM   abbreviated month name
        MM    two digit month          M     one or two digit month
        dd    two digit day            d     one or two digit day
        EEEE  full weekday name        EEE   abbreviated weekday name
        HH    two digit hour (0-23)    H     one or two digit hour
        mm    two digit minute         m     one or two digit minute
        ss    two digit second         s     one or two digit second
        SSS   milliseconds
        zzz   zone id                  z     zone abbreviation
        Z, X  offset '+HH:mm' or 'Z'
        'x'   quoted literal, '' is a single quote

    Any other character is a literal.
    """

    _OFFSET = re.compile(r"[+-]\d{2}:?\d{2}")

    # Valid run lengths for each pattern letter
    _COUNTS = {
        'y': (2, 4),
        'M': (1, 2, 3, 4),
        'd': (1, 2),
        'E': (3, 4),
        'H': (1, 2),
        'm': (1, 2),
        's': (1, 2),
        'S': (3,),
        'z': (1, 3),
        'Z': (1,),
        'X': (1,),
    }

    def __init__(self, pattern, zone=None):
        if not isinstance(pattern, str) or not pattern:
            from .Err import ArgErr
            raise ArgErr.make("Pattern cannot be empty")
        self._pattern = pattern
        self._zone = None
        if zone is not None:
            from .ZoneId import ZoneId
            self._zone = ZoneId.of(zone)
        self._tokens = DateTimeFormatter._compile(pattern)

    @staticmethod
    def of_pattern(pattern, zone=None):
        return DateTimeFormatter(pattern, zone)

    @staticmethod
    def _compile(pattern):
        """Split pattern into (letter, count) fields and ('', text) literals"""
        tokens = []
        i = 0
        n = len(pattern)
        while i < n:
            c = pattern[i]
            count = 1
            while i + count < n and pattern[i + count] == c:
                count += 1

            if c in DateTimeFormatter._COUNTS:
                if count not in DateTimeFormatter._COUNTS[c]:
                    from .Err import ArgErr
                    raise ArgErr.make(f"Invalid pattern: {c * count}")
                tokens.append((c, count))
                i += count
            elif c == "'":
                if count >= 2:
                    # '' is an escaped quote
                    DateTimeFormatter._add_literal(tokens, "'")
                    i += 2
                    continue
                # quoted run up to the closing quote, '' inside is a quote
                text = []
                i += 1
                while True:
                    end = pattern.find("'", i)
                    if end < 0:
                        from .Err import ArgErr
                        raise ArgErr.make(f"Unterminated quote in pattern: {pattern}")
                    text.append(pattern[i:end])
                    if pattern.startswith("''", end):
                        text.append("'")
                        i = end + 2
                        continue
                    i = end + 1
                    break
                DateTimeFormatter._add_literal(tokens, "".join(text))
            else:
                DateTimeFormatter._add_literal(tokens, c * count)
                i += count
        return tuple(tokens)

    @staticmethod
    def _add_literal(tokens, text):
        if tokens and tokens[-1][0] == '':
            tokens[-1] = ('', tokens[-1][1] + text)
        else:
            tokens.append(('', text))

    def pattern(self):
        return self._pattern

    def zone(self):
        return self._zone

    def with_zone(self, zone):
        """Copy of this formatter that renders in zone"""
        return DateTimeFormatter(self._pattern, zone)

    ##########################################################################
    # Format
    ##########################################################################

    def format(self, value):
        """Format a CalendarDate, WallTime, DateTime or ZonedDateTime.

        With a formatter zone, ZonedDateTime values are first moved to it
        and local DateTime values are taken as local time in it.  A pattern
        field the value does not carry raises UnsupportedErr.
        """
        from .DateTime import DateTime
        from .ZonedDateTime import ZonedDateTime
        if self._zone is not None:
            if isinstance(value, ZonedDateTime):
                value = value.with_zone_same_instant(self._zone)
            elif isinstance(value, DateTime):
                value = value.at_zone(self._zone)

        out = []
        for c, count in self._tokens:
            if c == '':
                out.append(count)
            elif c in ('z', 'Z', 'X'):
                out.append(self._format_zone(value, c, count))
            else:
                out.append(self._format_field(value, c, count))
        return "".join(out)

    @staticmethod
    def _format_field(value, c, count):
        if c == 'y':
            year = value.get("year")
            if count == 2:
                return f"{year % 100:02d}"
            from .CalendarDate import CalendarDate
            return CalendarDate._year_str(year)
        if c == 'M':
            month = value.get("month")
            if count == 4:
                return Month.of(month).full_name()
            if count == 3:
                return Month.of(month).abbr()
            return f"{month:02d}" if count == 2 else str(month)
        if c == 'E':
            wd = Weekday.of(value.get("day_of_week"))
            return wd.full_name() if count == 4 else wd.abbr()
        if c == 'S':
            return f"{value.get('millisecond'):03d}"

        field = {'d': "day", 'H': "hour", 'm': "minute", 's': "second"}[c]
        num = value.get(field)
        return f"{num:02d}" if count == 2 else str(num)

    @staticmethod
    def _format_zone(value, c, count):
        from .ZonedDateTime import ZonedDateTime
        from .TimezoneDatabase import format_offset
        if not isinstance(value, ZonedDateTime):
            from .Err import UnsupportedErr
            raise UnsupportedErr.make(f"{type(value).__name__} has no zone for pattern '{c * count}'")
        if c == 'z':
            return value.zone().id() if count == 3 else value.tz_abbr()
        return format_offset(value.offset_millis())

    ##########################################################################
    # Parse
    ##########################################################################

    def parse_date_time(self, s, checked=True):
        """Parse to a local DateTime; missing fields default to Jan 1, 00:00"""
        from .DateTime import DateTime
        return self._parse(s, checked, "DateTime", lambda f: DateTime.make(
            self._year(f), f.get("month", 1), f.get("day", 1),
            f.get("hour", 0), f.get("minute", 0), f.get("second", 0), f.get("millisecond", 0)))

    def parse_date(self, s, checked=True):
        from .CalendarDate import CalendarDate
        return self._parse(s, checked, "CalendarDate", lambda f: CalendarDate(
            self._year(f), f.get("month", 1), f.get("day", 1)))

    def parse_time(self, s, checked=True):
        from .WallTime import WallTime
        return self._parse(s, checked, "WallTime", lambda f: WallTime(
            f.get("hour", 0), f.get("minute", 0), f.get("second", 0), f.get("millisecond", 0)))

    def parse_zoned(self, s, checked=True):
        """Parse to a ZonedDateTime.

        The zone is the parsed zone id, else the parsed abbreviation, else
        the parsed offset, else this formatter's zone, else UTC.
        """
        from .DateTime import DateTime
        from .ZonedDateTime import ZonedDateTime
        from .ZoneId import ZoneId

        def build(f):
            local = DateTime.make(
                self._year(f), f.get("month", 1), f.get("day", 1),
                f.get("hour", 0), f.get("minute", 0), f.get("second", 0), f.get("millisecond", 0))
            zone = f.get("zone") or f.get("abbr") or f.get("offset") or self._zone or ZoneId.UTC
            return ZonedDateTime.of(local, zone)

        return self._parse(s, checked, "ZonedDateTime", build)

    def _year(self, fields):
        year = fields.get("year")
        if year is None:
            from .CalendarDate import CalendarDate
            year = CalendarDate.today(self._zone).year()
        return year

    def _parse(self, s, checked, type_name, build):
        from .Err import Err, ParseErr
        try:
            if not isinstance(s, str):
                raise ParseErr.make_str(type_name, s)
            try:
                fields = self._scan(s)
            except ValueError as e:
                raise ParseErr.make(f"Invalid {type_name}: '{s}' for pattern '{self._pattern}'", e)
            return build(fields)
        except Err:
            if not checked:
                return None
            raise

    def _scan(self, s):
        """Match s against the pattern, returning the parsed fields"""
        from .ZoneId import ZoneId
        from .TimezoneDatabase import TimezoneDatabase

        fields = {}
        pos = 0
        for c, count in self._tokens:
            if c == '':
                if not s.startswith(count, pos):
                    raise ValueError(f"Expected '{count}' at position {pos}")
                pos += len(count)
            elif c == 'y':
                year, pos = DateTimeFormatter._parse_int(s, pos, count)
                if count == 2:
                    year += 1900 if year > 50 else 2000
                fields["year"] = year
            elif c == 'M':
                if count >= 3:
                    word, pos = DateTimeFormatter._parse_word(s, pos)
                    month = Month.from_str(word, False)
                    if month is None:
                        raise ValueError(f"Invalid month: {word}")
                    fields["month"] = month.number()
                else:
                    fields["month"], pos = DateTimeFormatter._parse_int(s, pos, count)
            elif c == 'E':
                word, pos = DateTimeFormatter._parse_word(s, pos)
                if Weekday.from_str(word, False) is None:
                    raise ValueError(f"Invalid weekday: {word}")
            elif c == 'S':
                fields["millisecond"], pos = DateTimeFormatter._parse_int(s, pos, 3)
            elif c in ('d', 'H', 'm', 's'):
                field = {'d': "day", 'H': "hour", 'm': "minute", 's': "second"}[c]
                fields[field], pos = DateTimeFormatter._parse_int(s, pos, count)
            elif c == 'z' and count == 3:
                start = pos
                while pos < len(s) and (s[pos].isalnum() or s[pos] in "/_+-:"):
                    pos += 1
                if pos == start:
                    raise ValueError(f"Expected zone id at position {start}")
                fields["zone"] = ZoneId.of(s[start:pos])
            elif c == 'z':
                word, pos = DateTimeFormatter._parse_word(s, pos)
                if not TimezoneDatabase.is_known(word):
                    raise ValueError(f"Unknown zone abbreviation: {word}")
                fields["abbr"] = ZoneId.of(word)
            else:
                fields["offset"], pos = DateTimeFormatter._parse_offset(s, pos)

        if pos != len(s):
            raise ValueError(f"Unexpected text at position {pos}")
        return fields

    @staticmethod
    def _parse_int(s, pos, n):
        """Parse n digits from string at position.

        For n=1, allows parsing 1 or 2 digits (flexible).
        For n>1, requires exactly n digits (strict).
        """
        limit = 2 if n == 1 else n
        count = 0
        while pos + count < len(s) and count < limit and s[pos + count].isdigit() and s[pos + count].isascii():
            count += 1
        if count == 0:
            raise ValueError(f"Expected digits at position {pos}")
        if n > 1 and count < n:
            raise ValueError(f"Expected {n} digits at position {pos}, got {count}")
        return int(s[pos:pos + count]), pos + count

    @staticmethod
    def _parse_word(s, pos):
        start = pos
        while pos < len(s) and s[pos].isalpha():
            pos += 1
        if pos == start:
            raise ValueError(f"Expected name at position {start}")
        return s[start:pos], pos

    @staticmethod
    def _parse_offset(s, pos):
        """Parse offset like +05:00, -0500 or Z into a ZoneId"""
        from .ZoneId import ZoneId
        if s.startswith("Z", pos):
            return ZoneId.UTC, pos + 1
        m = DateTimeFormatter._OFFSET.match(s, pos)
        if m is None:
            raise ValueError(f"Expected offset at position {pos}")
        return ZoneId.of(m.group(0)), m.end()

    def to_str(self):
        return self._pattern


DateTimeFormatter.ISO_DATE = DateTimeFormatter("yyyy-MM-dd")
DateTimeFormatter.ISO_TIME = DateTimeFormatter("HH:mm:ss")
DateTimeFormatter.ISO_DATE_TIME = DateTimeFormatter("yyyy-MM-dd'T'HH:mm:ss")
DateTimeFormatter.ISO_OFFSET_DATE_TIME = DateTimeFormatter("yyyy-MM-dd'T'HH:mm:ssX")
DateTimeFormatter.RFC_1123 = DateTimeFormatter("EEE, dd MMM yyyy HH:mm:ss 'GMT'", "UTC")
