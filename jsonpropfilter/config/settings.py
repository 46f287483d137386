"""
Settings loading.

This module selects the settings class for the current environment based
on the JSONPROPFILTER_ENV environment variable and caches the instance.
"""

import os
from functools import lru_cache

from .base import FormatterSettings
from .development import DevelopmentSettings
from .production import ProductionSettings
from .testing import TestingSettings

ENV_VARIABLE = "JSONPROPFILTER_ENV"


@lru_cache()
def get_settings() -> FormatterSettings:
    """
    Get the settings instance for the current environment.

    The environment is read from JSONPROPFILTER_ENV. If not set, defaults to
    'production'. Call ``get_settings.cache_clear()`` after changing the
    environment.

    Returns:
        FormatterSettings: An instance of environment-specific settings
    """
    env = os.getenv(ENV_VARIABLE, "production").lower()
    if env == "development":
        return DevelopmentSettings()
    elif env == "testing":
        return TestingSettings()
    return ProductionSettings()
