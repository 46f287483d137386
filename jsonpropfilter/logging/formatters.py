"""
Standard library logging formatters.

This module adapts ``JsonPropertyFilterFormatter`` to the ``logging``
package: each ``LogRecord`` is converted to a ``LogEvent`` and written as
one JSON line.

Record to event mapping:
- ``record.msg`` is the message template, e.g. ``"User {UserId} logged in"``
- fields passed via ``extra=...`` become properties
- a single mapping argument (``logger.info("... {Id}", {"Id": 1})``) is
  merged into the properties, positional arguments become properties
  named ``"0"``, ``"1"``, ...
- ``SourceContext`` (logger name) and ``ThreadId`` are always added
- ``trace_id`` and ``span_id`` record attributes fill TraceId and SpanId

Limitations:
- %-style messages are not interpolated; the RenderedMessage of
  ``logger.info("%s", x)`` is the raw template.
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from jsonpropfilter.config import FormatterSettings, get_settings
from jsonpropfilter.events import (
    FormatProvider,
    LogEvent,
    LogEventLevel,
    MessageTemplate,
    to_property_value,
)
from jsonpropfilter.formatting import JsonPropertyFilterFormatter


class PropertyFilterFormatter(logging.Formatter):
    """
    Format log records as filtered single-line JSON.

    Example:
        ```python
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(PropertyFilterFormatter(allow_properties="clear,UserId"))
        logging.getLogger("app").addHandler(handler)
        ```
    """

    RESERVED_ATTRS = {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module", "msecs",
        "message", "msg", "name", "pathname", "process", "processName",
        "relativeCreated", "stack_info", "taskName", "thread", "threadName",
        "trace_id", "span_id",
    }

    def __init__(
        self,
        closing_delimiter: Optional[str] = None,
        render_message: bool = False,
        format_provider: Optional[FormatProvider] = None,
        allow_properties: Optional[str] = None,
        event_formatter: Optional[JsonPropertyFilterFormatter] = None,
    ):
        """
        Initialize the formatter.

        Args:
            closing_delimiter: Text appended after each JSON object
            render_message: If True, also write ``RenderedMessage``
            format_provider: Optional callable for message rendering
            allow_properties: Comma-separated property allow-list
            event_formatter: A ready-made formatter; overrides the other arguments
        """
        super().__init__()
        self.event_formatter = event_formatter or JsonPropertyFilterFormatter(
            closing_delimiter=closing_delimiter,
            render_message=render_message,
            format_provider=format_provider,
            allow_properties=allow_properties,
        )

    @classmethod
    def from_settings(
        cls, settings: Optional[FormatterSettings] = None
    ) -> "PropertyFilterFormatter":
        """Create a formatter from FormatterSettings (loaded from the environment if omitted)."""
        if settings is None:
            settings = get_settings()
        return cls(event_formatter=JsonPropertyFilterFormatter.from_settings(settings))

    def to_event(self, record: logging.LogRecord) -> LogEvent:
        """
        Convert a log record to a log event.

        Args:
            record: Log record to convert

        Returns:
            The equivalent LogEvent
        """
        properties: Dict[str, Any] = {}

        for key, value in record.__dict__.items():
            if key not in self.RESERVED_ATTRS and not key.startswith("_"):
                properties[key] = value

        if isinstance(record.args, Mapping):
            # Property names must be strings
            properties.update((str(key), value) for key, value in record.args.items())
        elif record.args:
            for index, value in enumerate(record.args):
                properties.setdefault(str(index), value)

        properties.setdefault("SourceContext", record.name)
        properties.setdefault("ThreadId", record.thread)

        exception = None
        if record.exc_info and record.exc_info[1] is not None:
            exception = record.exc_info[1]

        trace_id = getattr(record, "trace_id", None)
        span_id = getattr(record, "span_id", None)

        return LogEvent(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
            level=LogEventLevel.from_logging_level(record.levelno),
            message_template=MessageTemplate.parse(str(record.msg)),
            properties={
                name: to_property_value(value) for name, value in properties.items()
            },
            trace_id=str(trace_id) if trace_id is not None else None,
            span_id=str(span_id) if span_id is not None else None,
            exception=exception,
        )

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the specified record as JSON.

        Args:
            record: Log record to format

        Returns:
            The JSON line, without the trailing newline the handler adds
        """
        line = self.event_formatter.format_to_string(self.to_event(record))
        return line[:-1]
