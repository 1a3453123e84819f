from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments usually export upper-case names
    # (e.g. ``DIET_TRACKER_API_BASE_URL``), so matching is case-insensitive.
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="DIET_TRACKER_",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = "https://dietandlifestyle-backend.onrender.com/api"
    request_timeout: Optional[float] = None
    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
