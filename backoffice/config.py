"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    notification_default_duration_ms: int = Field(
        default=5000,
        description="Milliseconds before a non persistent notification expires",
        gt=0,
    )
    notification_latest_limit: int = Field(
        default=5,
        description="Number of notifications returned to the toast feed by default",
        gt=0,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA name or UTC offset used to timestamp notifications",
    )
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Level applied to the ``backoffice`` logger hierarchy",
    )
    cors_allow_origins: str = Field(
        default="http://localhost:5173",
        description="Comma separated origins allowed to call the API from the admin panel",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def cors_origins(self) -> list[str]:
        """Return the configured CORS origins as a list."""

        return [
            origin.strip()
            for origin in self.cors_allow_origins.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
