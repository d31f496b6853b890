"""Typed settings configuration - single source of truth."""

from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Structured completion service
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.4

    # Upper bound for a single model call (seconds)
    planning_timeout_seconds: float = 60.0

    # UI
    backend_url: str = "http://localhost:8000"
    ui_origin: str = "http://localhost:8501"

    # Local persistence
    wishlist_store_path: Path = Path(".roamfree/local_store.json")

    # External collaborators
    geolocation_url: str = "http://ip-api.com/json/"
    nominatim_url: str = "https://nominatim.openstreetmap.org"
    http_timeout_seconds: float = 10.0

    # Map fallback center (New York)
    default_center_lat: float = 40.7128
    default_center_lng: float = -74.0060


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
