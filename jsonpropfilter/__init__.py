"""
jsonpropfilter - Single-line JSON formatting for structured log events.

This package renders log events (timestamp, level, message template,
properties, optional trace/span ids and exception) as one JSON object per
line, writing only the properties permitted by a case-insensitive
allow-list.

Usage:
    import sys
    from jsonpropfilter import JsonPropertyFilterFormatter, LogEvent

    formatter = JsonPropertyFilterFormatter(allow_properties="clear,UserId")
    event = LogEvent.create("User {UserId} logged in", {"UserId": 42})
    formatter.format(event, sys.stdout)
"""

__version__ = "0.1.0"

# Public API exports
from jsonpropfilter.config import FormatterSettings, get_settings
from jsonpropfilter.errors import FormatterError, InvalidSettingsError, MissingArgumentError
from jsonpropfilter.events import LogEvent, LogEventLevel, MessageTemplate
from jsonpropfilter.formatting import (
    DEFAULT_ALLOWED_PROPERTIES,
    AllowList,
    JsonPropertyFilterFormatter,
    JsonValueFormatter,
)
from jsonpropfilter.logging import PropertyFilterFormatter, get_logger, setup_logger
