"""
Severity levels for log events.
"""

import logging
from enum import Enum


class LogEventLevel(str, Enum):
    """
    Enum for log event severity levels.

    The member name is what the formatter writes to the ``Level`` field.
    """

    Verbose = "Verbose"
    Debug = "Debug"
    Information = "Information"
    Warning = "Warning"
    Error = "Error"
    Fatal = "Fatal"

    @classmethod
    def from_logging_level(cls, levelno: int) -> "LogEventLevel":
        """
        Convert a standard library numeric level to a LogEventLevel.

        Levels between the named ones round down, so a custom level of 25
        maps to Information.

        Args:
            levelno: Numeric level, e.g. ``record.levelno``

        Returns:
            The matching LogEventLevel

        Example:
            ```python
            level = LogEventLevel.from_logging_level(logging.WARNING)
            assert level is LogEventLevel.Warning
            ```
        """
        if levelno >= logging.CRITICAL:
            return cls.Fatal
        if levelno >= logging.ERROR:
            return cls.Error
        if levelno >= logging.WARNING:
            return cls.Warning
        if levelno >= logging.INFO:
            return cls.Information
        if levelno >= logging.DEBUG:
            return cls.Debug
        return cls.Verbose
