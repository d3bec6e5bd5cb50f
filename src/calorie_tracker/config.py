"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str | None = None
    gemini_models_url: str = "https://generativelanguage.googleapis.com/v1/models"
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_fallback_model: str = "models/gemini-1.5-flash"
    gemini_preferred_marker: str = "gemini"
    gemini_timeout_seconds: float = 15.0
    supabase_url: str
    supabase_service_key: str
    default_daily_goal: int = 2000
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def resolve_api_key(raw: str | None) -> str | None:
    """Return a usable API key or None when unset or blank."""
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None
