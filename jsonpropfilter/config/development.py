"""
Development environment specific settings.
"""

from .base import FormatterSettings


class DevelopmentSettings(FormatterSettings):
    """
    Settings class for development environment.

    Renders messages and logs at DEBUG so output is easy to read locally.

    Attributes:
        RENDER_MESSAGE: True in development
        LOG_LEVEL: DEBUG in development
    """

    RENDER_MESSAGE: bool = True
    LOG_LEVEL: str = "DEBUG"
