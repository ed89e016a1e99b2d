"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_anon_key: str
    site_url: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def signup_redirect_url(site_url: str | None) -> str | None:
    """Return the confirmation redirect URL for sign-up emails."""
    if site_url is None:
        return None
    cleaned = site_url.strip().rstrip("/")
    if not cleaned:
        return None
    return f"{cleaned}/auth/callback"
