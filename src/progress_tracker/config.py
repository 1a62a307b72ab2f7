"""Application configuration."""

import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    default_timezone: str = "UTC"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("default_timezone")
    @classmethod
    def validate_default_timezone(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned or parse_timezone(cleaned, "") != cleaned:
            raise ValueError(f"Unknown timezone: {value!r}")
        return cleaned


def parse_timezone(raw: str | None, fallback: str) -> str:
    """Return a valid IANA timezone name or the fallback."""
    if raw is None:
        return fallback
    cleaned = raw.strip()
    if not cleaned:
        return fallback
    try:
        ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError):
        return fallback
    return cleaned
