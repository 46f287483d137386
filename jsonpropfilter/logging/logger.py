"""
Logger lookup and level names.
"""

import logging
from enum import Enum
from typing import Dict

# Type alias for Python's standard logger
Logger = logging.Logger

# Cache for loggers to avoid creating duplicates
_loggers: Dict[str, Logger] = {}


class LogLevel(str, Enum):
    """
    Enum for standard logging levels.

    This provides a type-safe way to specify log levels in code and configuration.
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, level: str) -> int:
        """
        Convert a string log level to the corresponding logging module constant.

        Args:
            level: The string representation of the log level (any case)

        Returns:
            The numeric log level, INFO for unknown names

        Example:
            ```python
            level = LogLevel.from_string("warning")
            assert level == logging.WARNING
            ```
        """
        level_map = {
            cls.DEBUG: logging.DEBUG,
            cls.INFO: logging.INFO,
            cls.WARNING: logging.WARNING,
            cls.ERROR: logging.ERROR,
            cls.CRITICAL: logging.CRITICAL,
        }
        name = level.value if isinstance(level, cls) else str(level).upper()
        return level_map.get(name, logging.INFO)


def get_logger(name: str) -> Logger:
    """
    Get a logger with the given name.

    This function returns a cached logger if it exists, or creates a new one.

    Args:
        name: The name of the logger, typically the module name

    Returns:
        A logger instance
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    _loggers[name] = logger

    return logger
