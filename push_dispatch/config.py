"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./push_dispatch.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone name used for stored timestamps (UTC when empty)",
    )
    firebase_credentials_file: str | None = Field(
        default=None,
        description="Path to a service account JSON file; application default credentials are used when empty",
    )
    firebase_project_id: str | None = Field(
        default=None,
        description="Firebase project identifier passed to the admin SDK",
    )
    push_link_base_url: str = Field(
        default="https://gym-app-firebase-79daf.web.app",
        description="Base URL prefixed to the click action of web push notifications",
    )
    push_icon: str = Field(
        default="/favicon.ico",
        description="Icon and badge path attached to web push notifications",
    )
    retention_days: int = Field(
        default=30,
        description="Age in days after which processed queue entries are deleted",
        gt=0,
    )
    retention_batch_limit: int = Field(
        default=500,
        description="Maximum number of queue entries deleted by one sweep",
        gt=0,
        le=500,
    )
    dispatch_workers: int = Field(
        default=4,
        description="Number of worker threads delivering queued notifications",
        gt=0,
    )
    enable_scheduler: bool = Field(
        default=True,
        description="Run the daily retention sweep inside the API process",
    )
    log_level: str = Field(default="INFO", description="Root logging level")

    @model_validator(mode="after")
    def _validate_link_base_url(self) -> "Settings":
        if not self.push_link_base_url.startswith(("http://", "https://")):
            raise ValueError("PUSH_LINK_BASE_URL must be an absolute http(s) URL")
        self.push_link_base_url = self.push_link_base_url.rstrip("/")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
