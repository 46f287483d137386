"""
Configuration module for the formatter.

This module provides:
- FormatterSettings: The settings class, loaded from environment variables.
- Environment-specific settings (development, testing, production).
- get_settings: Cached factory selecting the settings class from JSONPROPFILTER_ENV.

Example environment variables:

JSONPROPFILTER_ENV="production"  # Options: development, testing, production
JSONPROPFILTER_RENDER_MESSAGE=false
JSONPROPFILTER_ALLOW_PROPERTIES="clear,RequestId,UserId"
JSONPROPFILTER_CLOSING_DELIMITER=""
JSONPROPFILTER_LOG_LEVEL="INFO"
"""

from .base import FormatterSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .settings import get_settings
from .testing import TestingSettings

__all__ = [
    "FormatterSettings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestingSettings",
    "get_settings",
]
