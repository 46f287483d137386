"""
JSON formatter with a property allow-list.

Each call to ``format`` writes one log event as a single line of JSON::

    {"Timestamp":"2024-01-01T00:00:00.0000000+00:00","Level":"Information",
     "MessageTemplate":"Hello {Name}","Properties":{}}

Members are written in a fixed order: Timestamp, Level, MessageTemplate,
RenderedMessage, TraceId, SpanId, Exception, Properties. Only properties
permitted by the allow-list appear under ``Properties``.

Limitations:
- Writes are not atomic; callers sharing a sink between threads must
  serialise access themselves.
- The formatter never logs while formatting.
"""

import io
import traceback
from datetime import datetime, timezone
from typing import Optional, TextIO

from jsonpropfilter.config import FormatterSettings, get_settings
from jsonpropfilter.errors import InvalidSettingsError, MissingArgumentError
from jsonpropfilter.events import FormatProvider, LogEvent
from jsonpropfilter.formatting.allow_list import AllowList
from jsonpropfilter.formatting.json_value import (
    JsonValueFormatter,
    write_quoted_json_string,
)


def format_timestamp(timestamp: datetime) -> str:
    """
    Format a timestamp as an ISO-8601 round-trip string.

    Seven fractional digits and an explicit ``+HH:MM`` offset are always
    written. Naive timestamps are treated as UTC.

    Args:
        timestamp: The event time

    Returns:
        The formatted timestamp, e.g. ``2024-01-01T00:00:00.0000000+00:00``
    """
    if timestamp.tzinfo is None or timestamp.utcoffset() is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)

    offset_minutes = int(timestamp.utcoffset().total_seconds()) // 60
    sign = "-" if offset_minutes < 0 else "+"
    hours, minutes = divmod(abs(offset_minutes), 60)

    return (
        f"{timestamp.year:04d}-{timestamp.month:02d}-{timestamp.day:02d}"
        f"T{timestamp.hour:02d}:{timestamp.minute:02d}:{timestamp.second:02d}"
        f".{timestamp.microsecond:06d}0"
        f"{sign}{hours:02d}:{minutes:02d}"
    )


def format_exception(exception: BaseException) -> str:
    """Return the full description of an exception, traceback included."""
    lines = traceback.format_exception(
        type(exception), exception, exception.__traceback__
    )
    return "".join(lines).rstrip("\n")


class JsonPropertyFilterFormatter:
    """
    Render log events as single-line JSON, filtering properties by name.

    The formatter is immutable after construction and holds no per-call
    state, so one instance may be shared between threads as long as each
    thread writes to its own sink.

    Attributes:
        closing_delimiter: Text written after the closing brace, before the newline
        render_message: Whether to write the rendered message text
        format_provider: Optional callable used to render scalars in messages
        allow_list: The resolved property allow-list

    Example:
        ```python
        formatter = JsonPropertyFilterFormatter(allow_properties="clear,UserId")
        formatter.format(event, sys.stdout)
        ```
    """

    def __init__(
        self,
        closing_delimiter: Optional[str] = None,
        render_message: bool = False,
        format_provider: Optional[FormatProvider] = None,
        allow_properties: Optional[str] = None,
    ):
        """
        Initialize the formatter.

        Args:
            closing_delimiter: Text appended after the closing brace (default: none)
            render_message: If True, also write ``RenderedMessage``
            format_provider: Callable ``(value, format_spec) -> str`` for message rendering
            allow_properties: Comma-separated property names, or the ``clear``/``*`` sentinels

        Raises:
            InvalidSettingsError: If an argument has the wrong type
        """
        if closing_delimiter is not None and not isinstance(closing_delimiter, str):
            raise InvalidSettingsError(
                "closing_delimiter must be a string", setting="closing_delimiter"
            )
        if format_provider is not None and not callable(format_provider):
            raise InvalidSettingsError(
                "format_provider must be callable", setting="format_provider"
            )
        if allow_properties is not None and not isinstance(allow_properties, str):
            raise InvalidSettingsError(
                "allow_properties must be a comma-separated string",
                setting="allow_properties",
            )

        self._closing_delimiter = closing_delimiter or ""
        self._render_message = bool(render_message)
        self._format_provider = format_provider
        self._allow_list = AllowList.from_config(allow_properties)
        self._value_formatter = JsonValueFormatter()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[FormatterSettings] = None,
        format_provider: Optional[FormatProvider] = None,
    ) -> "JsonPropertyFilterFormatter":
        """
        Create a formatter from FormatterSettings.

        Args:
            settings: Optional settings, loaded from the environment if omitted
            format_provider: Optional callable for message rendering

        Returns:
            A configured formatter
        """
        if settings is None:
            settings = get_settings()

        return cls(
            closing_delimiter=settings.CLOSING_DELIMITER,
            render_message=settings.RENDER_MESSAGE,
            format_provider=format_provider,
            allow_properties=settings.ALLOW_PROPERTIES,
        )

    @property
    def closing_delimiter(self) -> str:
        return self._closing_delimiter

    @property
    def render_message(self) -> bool:
        return self._render_message

    @property
    def format_provider(self) -> Optional[FormatProvider]:
        return self._format_provider

    @property
    def allow_list(self) -> AllowList:
        return self._allow_list

    def format(self, event: LogEvent, output: TextIO) -> None:
        """
        Write ``event`` to ``output`` as one line of JSON.

        Args:
            event: The log event
            output: Text sink with a ``write(str)`` method

        Raises:
            MissingArgumentError: If ``event`` or ``output`` is None
        """
        if event is None:
            raise MissingArgumentError("event")
        if output is None:
            raise MissingArgumentError("output")

        output.write('{"Timestamp":"')
        output.write(format_timestamp(event.timestamp))
        output.write('","Level":"')
        output.write(_level_name(event.level))
        output.write('","MessageTemplate":')
        write_quoted_json_string(event.message_template.text, output)

        if self._render_message:
            output.write(',"RenderedMessage":')
            message = event.message_template.render(
                event.properties, self._format_provider
            )
            write_quoted_json_string(message, output)

        if event.trace_id is not None:
            output.write(',"TraceId":')
            write_quoted_json_string(str(event.trace_id), output)

        if event.span_id is not None:
            output.write(',"SpanId":')
            write_quoted_json_string(str(event.span_id), output)

        if event.exception is not None:
            output.write(',"Exception":')
            write_quoted_json_string(format_exception(event.exception), output)

        # Decided by the unfiltered count, so "Properties":{} is possible
        if event.properties:
            output.write(',"Properties":{')
            delimiter = ""
            for name, value in event.properties.items():
                if not self._allow_list.contains(name):
                    continue
                output.write(delimiter)
                delimiter = ","
                write_quoted_json_string(name, output)
                output.write(":")
                self._value_formatter.format(value, output)
            output.write("}")

        output.write("}")
        output.write(self._closing_delimiter)
        output.write("\n")

    def format_to_string(self, event: LogEvent) -> str:
        """Format ``event`` and return the line, trailing newline included."""
        buffer = io.StringIO()
        self.format(event, buffer)
        return buffer.getvalue()


def _level_name(level) -> str:
    return getattr(level, "value", None) or str(level)
