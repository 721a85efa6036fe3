"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    service_name: str = Field(
        default="Commercial Conditions API",
        description="Name reported by the health endpoint",
        min_length=1,
    )
    database_url: str = Field(
        default="sqlite:///./commercial_conditions.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to interpret naive validity timestamps",
    )
    resolution_timeout_seconds: float | None = Field(
        default=10.0,
        description="Deadline applied to a single resolution request; empty disables it",
        gt=0,
    )
    max_concurrent_lookups: int = Field(
        default=8,
        description="Upper bound of store lookups issued in parallel for one request",
        ge=1,
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level configured when the application starts",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the integration endpoints",
    )

    @field_validator("resolution_timeout_seconds", mode="before")
    @classmethod
    def _empty_timeout_disables_deadline(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
