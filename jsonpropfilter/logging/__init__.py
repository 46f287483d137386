"""
Logging integration.

This module plugs the JSON property-filter formatter into the standard
library ``logging`` package.

Limitations:
- Only stream handlers are configured by ``setup_logger``.
- %-style message arguments are not interpolated into RenderedMessage.
"""

from jsonpropfilter.logging.formatters import PropertyFilterFormatter
from jsonpropfilter.logging.logger import Logger, LogLevel, get_logger
from jsonpropfilter.logging.manager import ensure_logger, setup_logger

__all__ = [
    "Logger",
    "LogLevel",
    "get_logger",
    "ensure_logger",
    "setup_logger",
    "PropertyFilterFormatter",
]
