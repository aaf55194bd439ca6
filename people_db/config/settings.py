"""Environment configuration and validation.

Settings are loaded from environment variables (optionally via a local `.env` file). The default
filter mode is validated at startup so an unsupported mode name never reaches the store.
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from people_db.query.normalize import FilterMode, parse_filter_mode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    filter_mode: FilterMode = Field(default=FilterMode.strict, alias="PEOPLE_DB_FILTER_MODE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("filter_mode", mode="before")
    @classmethod
    def validate_filter_mode(cls, value: object) -> FilterMode:
        """Accept a mode name in any letter case; reject anything else as unsupported."""

        if isinstance(value, str):
            value = value.strip().lower()
        return parse_filter_mode(value)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        return value.upper()


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
