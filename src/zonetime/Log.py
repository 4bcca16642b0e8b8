#
# Log - Logging support for zonetime
#
import logging

from .Obj import Obj


class LogLevel(Obj):
    """
    LogLevel represents the severity of a log message.
    """

    _levels = {}
    _vals_list = None

    def __init__(self, name, ordinal):
        self._name = name
        self._ordinal = ordinal

    @staticmethod
    def from_str(name, checked=True):
        """Parse LogLevel from string"""
        name_lower = name.strip().lower() if isinstance(name, str) else None
        if name_lower in LogLevel._levels:
            return LogLevel._levels[name_lower]
        if checked:
            from .Err import ParseErr
            raise ParseErr.make(f"Unknown log level: {name}")
        return None

    @staticmethod
    def vals():
        """Get all log level values"""
        if LogLevel._vals_list is None:
            LogLevel._vals_list = (LogLevel._debug, LogLevel._info, LogLevel._warn,
                                   LogLevel._err, LogLevel._silent)
        return LogLevel._vals_list

    @staticmethod
    def debug():
        return LogLevel._debug

    @staticmethod
    def info():
        return LogLevel._info

    @staticmethod
    def warn():
        return LogLevel._warn

    @staticmethod
    def err():
        return LogLevel._err

    @staticmethod
    def silent():
        return LogLevel._silent

    def name(self):
        """Get level name"""
        return self._name

    def ordinal(self):
        """Get numeric ordinal"""
        return self._ordinal

    def to_str(self):
        return self._name

    def compare(self, that):
        return self._ordinal - that._ordinal

    def __eq__(self, other):
        if not isinstance(other, LogLevel):
            return False
        return self._ordinal == other._ordinal

    def __hash__(self):
        return hash(self._ordinal)

    def py_level(self):
        """Map to the standard library logging level"""
        return {
            0: logging.DEBUG,
            1: logging.INFO,
            2: logging.WARNING,
            3: logging.ERROR,
        }.get(self._ordinal, logging.CRITICAL + 10)


# Define log levels - stored in private class attributes
LogLevel._debug = LogLevel("debug", 0)
LogLevel._info = LogLevel("info", 1)
LogLevel._warn = LogLevel("warn", 2)
LogLevel._err = LogLevel("err", 3)
LogLevel._silent = LogLevel("silent", 4)

for _lvl in (LogLevel._debug, LogLevel._info, LogLevel._warn, LogLevel._err, LogLevel._silent):
    LogLevel._levels[_lvl._name] = _lvl
del _lvl


class LogRec(Obj):
    """
    LogRec represents a single log record.
    """

    @staticmethod
    def make(time, level, log_name, msg, err=None):
        return LogRec(time, level, log_name, msg, err)

    def __init__(self, time, level, log_name, msg, err=None):
        self._time = time
        self._level = level
        self._log_name = log_name
        self._msg = msg
        self._err = err

    def time(self):
        """Timestamp as a UTC ZonedDateTime"""
        return self._time

    def level(self):
        return self._level

    def log_name(self):
        return self._log_name

    def msg(self):
        return self._msg

    def err(self):
        return self._err

    def to_str(self):
        return f"[{self._level.name()}] [{self._log_name}] {self._msg}"


class Log(Obj):
    """
    Log provides named, level-gated logging on top of the logging module.
    """

    _logs = {}
    _handlers = []  # callables taking a LogRec

    def __init__(self, name, register=True):
        """Create a new log. If register=True, adds to global registry."""
        if not Log._is_valid_name(name):
            from .Err import NameErr
            raise NameErr.make(f"Invalid log name: {name}")

        if register and name in Log._logs:
            from .Err import ArgErr
            raise ArgErr.make(f"Log already registered: {name}")

        self._name = name
        self._level = Log._initial_level()
        self._pyLogger = logging.getLogger(name)

        if register:
            Log._logs[name] = self

    @staticmethod
    def _is_valid_name(name):
        """Validate log name - must be valid identifier characters"""
        if not isinstance(name, str) or not name:
            return False
        for c in name:
            if not (c.isalnum() or c == '.' or c == '_'):
                return False
        return True

    @staticmethod
    def _initial_level():
        from .Env import Env
        configured = Env.cur().config("logLevel", "info")
        return LogLevel.from_str(configured, False) or LogLevel._info

    @staticmethod
    def make(name, register=True):
        """Create a new log"""
        return Log(name, register)

    @staticmethod
    def get(name):
        """Get or create a log by name"""
        if not Log._is_valid_name(name):
            from .Err import NameErr
            raise NameErr.make(f"Invalid log name: {name}")

        if name in Log._logs:
            return Log._logs[name]
        return Log(name, True)

    def name(self):
        return self._name

    def level(self, value=None):
        """Get or set log level - called as log.level() or log.level(newLevel)"""
        if value is None:
            return self._level
        self._level = value
        return None

    def is_enabled(self, level):
        return level._ordinal >= self._level._ordinal and level is not LogLevel._silent

    def debug(self, msg, err=None):
        if self.is_enabled(LogLevel._debug):
            self._log(LogLevel._debug, msg, err)

    def info(self, msg, err=None):
        if self.is_enabled(LogLevel._info):
            self._log(LogLevel._info, msg, err)

    def warn(self, msg, err=None):
        if self.is_enabled(LogLevel._warn):
            self._log(LogLevel._warn, msg, err)

    def err(self, msg, err=None):
        if self.is_enabled(LogLevel._err):
            self._log(LogLevel._err, msg, err)

    def _log(self, level, msg, err):
        """Internal log method - creates LogRec and calls log()"""
        from .ZonedDateTime import ZonedDateTime
        from .ZoneId import ZoneId
        rec = LogRec(ZonedDateTime.now(ZoneId.UTC), level, self._name, msg, err)
        self.log(rec)

    def log(self, rec):
        """Log a record - can be overridden by subclasses"""
        for handler in list(Log._handlers):
            try:
                handler(rec)
            except Exception:
                self._pyLogger.exception("Log handler failed: %r", handler)

        self._pyLogger.log(rec._level.py_level(), rec._msg, exc_info=rec._err)

    def to_str(self):
        return self._name

    @staticmethod
    def handlers():
        """Get global log handlers"""
        return list(Log._handlers)

    @staticmethod
    def add_handler(handler):
        """Add a global log handler"""
        if not callable(handler):
            from .Err import ArgErr
            raise ArgErr.make(f"Log handler must be callable: {handler!r}")
        Log._handlers.append(handler)

    @staticmethod
    def remove_handler(handler):
        """Remove a global log handler"""
        if handler in Log._handlers:
            Log._handlers.remove(handler)
