"""
Production environment specific settings.
"""

from .base import FormatterSettings


class ProductionSettings(FormatterSettings):
    """
    Settings class for production environment.

    Keeps output compact: no rendered message, WARNING and above only.

    Attributes:
        RENDER_MESSAGE: False in production
        LOG_LEVEL: WARNING in production
    """

    RENDER_MESSAGE: bool = False
    LOG_LEVEL: str = "WARNING"
