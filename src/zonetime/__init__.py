#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

# zonetime - calendar, wall clock and zone-aware date-time values

# Base types
from .Obj import Obj
from .Err import Err, ArgErr, ParseErr, UnsupportedErr, NameErr
from .Enum import Enum

# Environment
from .Env import Env
from .Log import Log, LogLevel, LogRec

# Date/Time
from .Duration import Duration
from .Month import Month
from .Weekday import Weekday
from .CalendarDate import CalendarDate
from .WallTime import WallTime
from .DateTime import DateTime

# Zones
from .ZoneId import ZoneId
from .TimezoneDatabase import TimezoneDatabase, TimezoneOffsetData, DstRule, DstTransition
from .ZonedDateTime import ZonedDateTime
from .DateTimeFormatter import DateTimeFormatter

__version__ = "1.0.0"

__all__ = [
    "Obj", "Err", "ArgErr", "ParseErr", "UnsupportedErr", "NameErr", "Enum",
    "Env", "Log", "LogLevel", "LogRec",
    "Duration", "Month", "Weekday", "CalendarDate", "WallTime", "DateTime",
    "ZoneId", "TimezoneDatabase", "TimezoneOffsetData", "DstRule", "DstTransition",
    "ZonedDateTime", "DateTimeFormatter",
]
