"""Application configuration settings."""

from __future__ import annotations

from datetime import timedelta
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
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to store and display event timestamps",
    )
    enable_scheduler: bool = Field(
        default=False,
        description="Start the reminder scheduler together with the application",
    )
    reminder_offset_minutes: int = Field(
        default=30,
        description="Lead time before an event starts at which its reminder is due",
        gt=0,
    )
    reminder_tick_seconds: int = Field(
        default=60,
        description="Period between two reminder scheduler ticks",
        gt=0,
    )
    reminder_catch_up: bool = Field(
        default=False,
        description="Also dispatch unsent reminders whose due window was missed",
    )
    delivery_workers: int = Field(
        default=4,
        description="Worker threads used for email deliveries (0 delivers inline)",
        ge=0,
    )
    delivery_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to each outgoing email request",
        gt=0,
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    @property
    def reminder_offset(self) -> timedelta:
        return timedelta(minutes=self.reminder_offset_minutes)

    @property
    def reminder_period(self) -> timedelta:
        return timedelta(seconds=self.reminder_tick_seconds)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
