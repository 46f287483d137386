"""
Log event model.

This module provides the event type formatters consume: the event itself,
its severity levels, its message template and its property values.
"""

from jsonpropfilter.events.event import LogEvent
from jsonpropfilter.events.level import LogEventLevel
from jsonpropfilter.events.template import (
    FormatProvider,
    MessageTemplate,
    PropertyToken,
    TextToken,
    render_property_value,
)
from jsonpropfilter.events.values import (
    DictionaryValue,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
    to_property_value,
)

__all__ = [
    "LogEvent",
    "LogEventLevel",
    "MessageTemplate",
    "TextToken",
    "PropertyToken",
    "FormatProvider",
    "render_property_value",
    "LogEventPropertyValue",
    "ScalarValue",
    "SequenceValue",
    "StructureValue",
    "DictionaryValue",
    "to_property_value",
]
