"""
Configuration management for Conformer.

Environment-based configuration using Pydantic BaseSettings. Every field can
be overridden with a ``CONFORMER_`` prefixed environment variable or through a
``.env`` file in the working directory (``CONFORMER_ENV_FILE`` points
elsewhere).
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SETTINGS_ENV_FILE = Path(os.getenv("CONFORMER_ENV_FILE", ".env")).expanduser()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Runtime settings for schema loading and artifact generation.

    Environment variables are loaded with the CONFORMER_ prefix, for example
    CONFORMER_LOG_LEVEL=DEBUG or CONFORMER_TYPE_OVERRIDES_FILE=types.yml.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (uppercase)",
    )
    log_json: bool = Field(
        default=True,
        description="Render log events as JSON; console rendering otherwise",
    )
    if_not_exists: bool = Field(
        default=True,
        description="Emit CREATE TABLE IF NOT EXISTS instead of CREATE TABLE",
    )
    type_overrides_file: Optional[Path] = Field(
        default=None,
        description="YAML file mapping extra value-type tokens to storage kinds",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="CONFORMER_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
