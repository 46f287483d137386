"""
JSON rendering of property values.

Escaping and number formatting are delegated to the standard ``json``
module. The formatter is total: every property value, including scalars
wrapping arbitrary objects, produces valid JSON.
"""

import io
import json
import math
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, TextIO
from uuid import UUID

from jsonpropfilter.events.values import (
    DictionaryValue,
    LogEventPropertyValue,
    ScalarValue,
    SequenceValue,
    StructureValue,
)

TYPE_TAG_PROPERTY = "_typeTag"


def quote_json_string(text: str) -> str:
    """Return ``text`` as a quoted, escaped JSON string literal."""
    return json.dumps(text, ensure_ascii=False)


def write_quoted_json_string(text: str, output: TextIO) -> None:
    """
    Write ``text`` to ``output`` as a quoted, escaped JSON string literal.

    Args:
        text: Any string
        output: Text sink
    """
    output.write(quote_json_string(text))


class JsonValueFormatter:
    """
    Write property values as JSON literals.

    Sequences become arrays, structures and dictionaries become objects.
    Structures with a type tag get a leading ``_typeTag`` member.
    """

    def __init__(self, type_tag_name: str = TYPE_TAG_PROPERTY):
        self.type_tag_name = type_tag_name

    def format(self, value: LogEventPropertyValue, output: TextIO) -> None:
        """
        Write ``value`` to ``output`` as JSON.

        Args:
            value: The property value
            output: Text sink
        """
        if isinstance(value, ScalarValue):
            output.write(self.format_literal(value.value))
        elif isinstance(value, SequenceValue):
            self._format_sequence(value, output)
        elif isinstance(value, StructureValue):
            self._format_structure(value, output)
        elif isinstance(value, DictionaryValue):
            self._format_dictionary(value, output)
        else:
            output.write(self.format_literal(value))

    def format_to_string(self, value: LogEventPropertyValue) -> str:
        parts = io.StringIO()
        self.format(value, parts)
        return parts.getvalue()

    def format_literal(self, value: Any) -> str:
        """Render a single scalar as a JSON literal."""
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return quote_json_string(value)
        if isinstance(value, int):
            return json.dumps(value)
        if isinstance(value, float):
            if math.isfinite(value):
                return json.dumps(value)
            return quote_json_string(_non_finite_name(value))
        if isinstance(value, Decimal):
            if value.is_finite():
                return str(value)
            if value.is_nan():
                return quote_json_string("NaN")
            return quote_json_string("-Infinity" if value.is_signed() else "Infinity")
        if isinstance(value, (datetime, date, time)):
            return quote_json_string(value.isoformat())
        if isinstance(value, UUID):
            return quote_json_string(str(value))
        if isinstance(value, (bytes, bytearray, memoryview)):
            return quote_json_string(bytes(value).hex())
        return quote_json_string(str(value))

    def _format_sequence(self, value: SequenceValue, output: TextIO) -> None:
        output.write("[")
        for index, element in enumerate(value.elements):
            if index:
                output.write(",")
            self.format(element, output)
        output.write("]")

    def _format_structure(self, value: StructureValue, output: TextIO) -> None:
        output.write("{")
        delimiter = ""
        if value.type_tag is not None:
            write_quoted_json_string(self.type_tag_name, output)
            output.write(":")
            write_quoted_json_string(value.type_tag, output)
            delimiter = ","
        for name, element in value.properties:
            output.write(delimiter)
            delimiter = ","
            write_quoted_json_string(name, output)
            output.write(":")
            self.format(element, output)
        output.write("}")

    def _format_dictionary(self, value: DictionaryValue, output: TextIO) -> None:
        output.write("{")
        for index, (key, element) in enumerate(value.elements):
            if index:
                output.write(",")
            key_value = key.value if isinstance(key, ScalarValue) else key
            write_quoted_json_string(
                "null" if key_value is None else str(key_value), output
            )
            output.write(":")
            self.format(element, output)
        output.write("}")


def _non_finite_name(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"

