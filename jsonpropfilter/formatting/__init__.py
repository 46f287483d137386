"""
Event formatting module.

This module provides the JSON property-filter formatter together with the
allow-list it uses to select properties and the JSON value renderer it
delegates property values to.
"""

from jsonpropfilter.formatting.allow_list import (
    CLEAR,
    DEFAULT_ALLOWED_PROPERTIES,
    WILDCARD,
    AllowList,
    parse_property_names,
)
from jsonpropfilter.formatting.json_property_filter import (
    JsonPropertyFilterFormatter,
    format_exception,
    format_timestamp,
)
from jsonpropfilter.formatting.json_value import (
    JsonValueFormatter,
    quote_json_string,
    write_quoted_json_string,
)

__all__ = [
    "JsonPropertyFilterFormatter",
    "AllowList",
    "DEFAULT_ALLOWED_PROPERTIES",
    "WILDCARD",
    "CLEAR",
    "parse_property_names",
    "JsonValueFormatter",
    "quote_json_string",
    "write_quoted_json_string",
    "format_timestamp",
    "format_exception",
]
