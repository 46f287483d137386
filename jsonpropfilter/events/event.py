"""
The log event model consumed by formatters.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from jsonpropfilter.events.level import LogEventLevel
from jsonpropfilter.events.template import MessageTemplate
from jsonpropfilter.events.values import LogEventPropertyValue, to_property_value


@dataclass(frozen=True)
class LogEvent:
    """
    One structured log record.

    Formatters treat events as read-only. ``properties`` keeps insertion
    order, which is the order properties are written in.

    Attributes:
        timestamp: When the event occurred (naive values are treated as UTC)
        level: Severity
        message_template: The parsed, unrendered message template
        properties: Property values by name
        trace_id: Optional distributed trace identifier
        span_id: Optional span identifier
        exception: Optional captured exception
    """

    timestamp: datetime
    level: LogEventLevel
    message_template: MessageTemplate
    properties: Dict[str, LogEventPropertyValue] = field(default_factory=dict)
    trace_id: Optional[str] = None
    span_id: Optional[str] = None
    exception: Optional[BaseException] = None

    @classmethod
    def create(
        cls,
        message_template: Union[str, MessageTemplate],
        properties: Optional[Mapping[str, Any]] = None,
        level: Union[LogEventLevel, str] = LogEventLevel.Information,
        timestamp: Optional[datetime] = None,
        trace_id: Optional[str] = None,
        span_id: Optional[str] = None,
        exception: Optional[BaseException] = None,
    ) -> "LogEvent":
        """
        Build an event from plain Python values.

        Args:
            message_template: Template text or an already parsed template
            properties: Plain values by name, captured with ``to_property_value``
            level: Severity, as a member or its name
            timestamp: Event time, defaults to now (UTC)
            trace_id: Optional trace identifier
            span_id: Optional span identifier
            exception: Optional captured exception

        Returns:
            A new LogEvent

        Example:
            ```python
            event = LogEvent.create("User {UserId} logged in", {"UserId": 42})
            ```
        """
        if isinstance(message_template, str):
            message_template = MessageTemplate.parse(message_template)
        if isinstance(level, str) and not isinstance(level, LogEventLevel):
            level = LogEventLevel(level)

        return cls(
            timestamp=timestamp or datetime.now(timezone.utc),
            level=level,
            message_template=message_template,
            properties={
                name: to_property_value(value)
                for name, value in (properties or {}).items()
            },
            trace_id=trace_id,
            span_id=span_id,
            exception=exception,
        )

    def render_message(self, format_provider=None) -> str:
        """Render the message template against this event's properties."""
        return self.message_template.render(self.properties, format_provider)
