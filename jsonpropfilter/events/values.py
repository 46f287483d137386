"""
Property values carried by log events.

A property value is one of four shapes:

- ScalarValue: a single primitive (or any object rendered through ``str``)
- SequenceValue: an ordered list of values
- StructureValue: named fields with an optional type tag
- DictionaryValue: scalar keys mapped to values

Values are immutable and nest freely. Use ``to_property_value`` to
capture plain Python objects.
"""

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class ScalarValue:
    """A single primitive value."""

    value: Any = None


@dataclass(frozen=True)
class SequenceValue:
    """An ordered sequence of property values."""

    elements: Tuple["LogEventPropertyValue", ...] = ()


@dataclass(frozen=True)
class StructureValue:
    """
    A structured object with named fields.

    Attributes:
        properties: Ordered (name, value) pairs
        type_tag: Optional type name, written as ``_typeTag`` in JSON
    """

    properties: Tuple[Tuple[str, "LogEventPropertyValue"], ...] = ()
    type_tag: Optional[str] = None


@dataclass(frozen=True)
class DictionaryValue:
    """A mapping of scalar keys to property values, in insertion order."""

    elements: Tuple[Tuple[ScalarValue, "LogEventPropertyValue"], ...] = ()


LogEventPropertyValue = Union[ScalarValue, SequenceValue, StructureValue, DictionaryValue]

_PROPERTY_VALUE_TYPES = (ScalarValue, SequenceValue, StructureValue, DictionaryValue)

# Iterables that are captured whole rather than element by element
_SCALAR_ITERABLES = (str, bytes, bytearray, memoryview)


def to_property_value(obj: Any) -> LogEventPropertyValue:
    """
    Capture a plain Python object as a property value.

    Args:
        obj: Any object

    Returns:
        The captured property value

    Example:
        ```python
        to_property_value({"id": 1, "tags": ["a", "b"]})
        # DictionaryValue(elements=((ScalarValue("id"), ScalarValue(1)),
        #                           (ScalarValue("tags"), SequenceValue(...))))
        ```
    """
    if isinstance(obj, _PROPERTY_VALUE_TYPES):
        return obj

    if isinstance(obj, Mapping):
        return DictionaryValue(
            tuple(
                (ScalarValue(key), to_property_value(value))
                for key, value in obj.items()
            )
        )

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return StructureValue(
            tuple(
                (f.name, to_property_value(getattr(obj, f.name)))
                for f in dataclasses.fields(obj)
            ),
            type_tag=type(obj).__name__,
        )

    if isinstance(obj, (set, frozenset)):
        return SequenceValue(
            tuple(to_property_value(item) for item in sorted(obj, key=repr))
        )

    if isinstance(obj, Iterable) and not isinstance(obj, _SCALAR_ITERABLES):
        return SequenceValue(tuple(to_property_value(item) for item in obj))

    return ScalarValue(obj)
