"""
Testing environment specific settings.
"""

from .base import FormatterSettings


class TestingSettings(FormatterSettings):
    """
    Settings class for testing environment.

    Attributes:
        LOG_LEVEL: DEBUG for detailed test output
    """

    LOG_LEVEL: str = "DEBUG"
