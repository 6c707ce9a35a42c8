"""Settings and configuration management."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("text", "json")


class Settings(BaseSettings):
    """Application settings.

    Read from ``BROWSER_DETECT_*`` environment variables or a ``.env``
    file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="BROWSER_DETECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # User agent source
    user_agent: Optional[str] = Field(
        None, description="Fallback user agent when none is found in the environment"
    )
    user_agent_variable: str = Field(
        "HTTP_USER_AGENT",
        description="Environment variable holding the current user agent (CGI style)",
    )

    # Logging
    log_level: str = Field("WARNING", description="Logging level")
    log_format: str = Field("text", description="Log format: 'text' or 'json'")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log level {value!r}, expected one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"Invalid log format {value!r}, expected 'text' or 'json'")
        return fmt


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
