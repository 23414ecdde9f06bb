"""Type-safe environment configuration using Pydantic Settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Every field has a default, so the CLI runs with no environment at all.
    Variables are read with the ``TRENDING_`` prefix, e.g. ``TRENDING_LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
        env_ignore_empty=True,
    )

    APP_NAME: str = Field(
        default="github-trending",
        description="Application name"
    )

    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Logging level"
    )

    LOG_FORMAT: Literal["text", "json"] = Field(
        default="text",
        description="Log line format on stderr"
    )

    REQUEST_TIMEOUT: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
        gt=0  # Must be greater than 0
    )

    # GitHub serves a different page to clients it does not recognise as browsers
    USER_AGENT: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent to the trending page"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_levels}, got '{v}'"
            )
        return v_upper


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Loads settings from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton. Useful for testing."""
    global _settings
    _settings = None
