"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str | None = None
    supabase_service_key: str | None = None
    app_url: str = "http://localhost:3000"
    environment: str = _ENVIRONMENT
    meals_prefetch_days: int = 7
    cache_ttl_seconds: int = 300
    food_search_limit: int = 50
    recent_foods_limit: int = 8

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def is_supabase_configured(self) -> bool:
        """Return True when both the Supabase URL and key are set."""
        return bool(self.supabase_url and self.supabase_service_key)
