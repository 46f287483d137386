"""
Logger configuration.

This module wires the JSON property-filter formatter into standard
library loggers.
"""

import logging
import sys
from typing import Optional, TextIO

from jsonpropfilter.config import FormatterSettings
from jsonpropfilter.logging.formatters import PropertyFilterFormatter
from jsonpropfilter.logging.logger import LogLevel, get_logger

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str,
    level: Optional[str] = None,
    format: str = DEFAULT_FORMAT,
    debug: bool = False,
    json_format: bool = False,
    settings: Optional[FormatterSettings] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Create and configure a logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Logging level name; defaults to ``settings.LOG_LEVEL`` or INFO
        format: Log message format (ignored if json_format=True)
        debug: If True, sets level to DEBUG regardless of level parameter
        json_format: If True, outputs filtered JSON lines
        settings: Optional formatter settings, used for the level and the JSON formatter
        stream: Output stream (default: stdout)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = settings.LOG_LEVEL if settings is not None else LogLevel.INFO
    log_level = logging.DEBUG if debug else LogLevel.from_string(level)

    logger = get_logger(name)
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    if json_format:
        formatter = PropertyFilterFormatter.from_settings(settings)
    else:
        formatter = logging.Formatter(format)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def ensure_logger(
    logger: Optional[logging.Logger] = None,
    name: Optional[str] = None,
) -> logging.Logger:
    """
    Return the provided logger, or look one up by name.

    Args:
        logger: An existing logger instance to use if provided
        name: Module name (usually __name__) used when logger is None

    Returns:
        Either the provided logger or the named one

    Raises:
        ValueError: If neither a logger nor a name is given
    """
    if logger:
        return logger

    if not name:
        raise ValueError("Module name must be provided when logger is not specified")

    return get_logger(name)
