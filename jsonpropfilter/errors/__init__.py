"""
Error handling module for the formatter.

Limitations:
- Only argument and settings validation errors are defined here.
- Errors raised by output sinks are propagated unchanged.
"""

from jsonpropfilter.errors.exceptions import (
    FormatterError,
    InvalidSettingsError,
    MissingArgumentError,
)

__all__ = [
    "FormatterError",
    "MissingArgumentError",
    "InvalidSettingsError",
]
