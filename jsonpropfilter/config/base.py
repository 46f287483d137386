"""
Base configuration module for the formatter.

This module provides the settings class that environment-specific settings
classes inherit from. Values are read from environment variables prefixed
with ``JSONPROPFILTER_`` (and from a ``.env`` file when present).
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FormatterSettings(BaseSettings):
    """
    Settings for the JSON property-filter formatter.

    Attributes:
        CLOSING_DELIMITER: Text written after each JSON object, before the newline
        RENDER_MESSAGE: Write the rendered message alongside the template
        ALLOW_PROPERTIES: Comma-separated property allow-list ("clear" and "*" are sentinels)
        LOG_LEVEL: Level for loggers created by ``setup_logger``
    """

    CLOSING_DELIMITER: str = Field(
        default="", description="Text written after each JSON object"
    )
    RENDER_MESSAGE: bool = Field(
        default=False, description="Write the rendered message text"
    )
    ALLOW_PROPERTIES: Optional[str] = Field(
        default=None,
        description='Comma-separated property allow-list; "clear" and "*" are sentinels',
    )
    LOG_LEVEL: str = Field(
        default="INFO", description="Level for loggers created by setup_logger"
    )

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, value):
        """Normalise the level name and reject unknown levels."""
        if value is None:
            return "INFO"
        level = str(value).strip().upper()
        if level not in LOG_LEVEL_NAMES:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVEL_NAMES)}. "
                f"You provided: {value}"
            )
        return level

    model_config = SettingsConfigDict(
        env_prefix="JSONPROPFILTER_", env_file=".env", case_sensitive=True, extra="ignore"
    )
