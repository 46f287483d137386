"""
Exception classes for the formatter.

This module provides a small exception hierarchy used by the formatter
and its configuration layer. Sink I/O errors are never wrapped; they
propagate to the caller as raised by the sink.
"""

from typing import Any, Dict, Optional


class FormatterError(Exception):
    """
    Base exception for all formatter errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: FORMATTER_ERROR)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "Formatter error",
        code: str = "FORMATTER_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class MissingArgumentError(FormatterError, ValueError):
    """Exception raised when a required argument is None."""

    def __init__(
        self,
        argument: str,
        message: Optional[str] = None,
        code: str = "MISSING_ARGUMENT",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.argument = argument
        details = details or {}
        details["argument"] = argument

        super().__init__(
            message=message or f"Argument '{argument}' must not be None",
            code=code,
            details=details,
        )


class InvalidSettingsError(FormatterError, ValueError):
    """Exception raised when formatter settings are rejected at construction."""

    def __init__(
        self,
        message: str = "Invalid formatter settings",
        setting: Optional[str] = None,
        code: str = "INVALID_SETTINGS",
        details: Optional[Dict[str, Any]] = None,
    ):
        if setting:
            details = details or {}
            details["setting"] = setting

        super().__init__(message=message, code=code, details=details)
