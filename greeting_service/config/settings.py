"""Typed runtime settings loaded from the process environment."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORT = "8080"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `port` reads from `PORT`. Empty values fall back to defaults.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port, kept as text to match the listen address form.
        log_level: Threshold name for the process logger.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    host: str = Field(default="0.0.0.0")
    port: str = Field(default=DEFAULT_PORT)
    log_level: str = Field(default="INFO")

    @field_validator("port", mode="before")
    @classmethod
    def _validate_port(cls, value: object) -> str:
        stripped_value = str(value).strip()
        if not stripped_value:
            return DEFAULT_PORT
        if not stripped_value.isdigit() or not 1 <= int(stripped_value) <= 65535:
            raise ValueError("port must be an integer between 1 and 65535")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level_name = value.strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            raise ValueError(f"unknown log level: {value}")
        return level_name


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from the environment.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update environment variables. Details: {error}"
        ) from error
