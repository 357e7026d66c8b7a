# Settings — environment-driven configuration.
# Created: 2026-10-19
#
# Values come from DRIVEGALLERY_* environment variables or a local .env file.
# get_settings() is cached; tests call get_settings.cache_clear() after
# changing the environment.

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_DRIVE_API_BASE = "https://www.googleapis.com/drive/v3"


class Settings(BaseSettings):
    """Drive Gallery settings."""

    model_config = SettingsConfigDict(
        env_prefix="DRIVEGALLERY_",
        env_file=".env",
        extra="ignore",
    )

    # Public API key for the Drive listing endpoint. Fetching is impossible
    # without it; the server still starts so the form can be shown.
    google_api_key: SecretStr | None = None
    drive_api_base: str = DEFAULT_DRIVE_API_BASE
    page_size: int = Field(default=1000, ge=1, le=1000)
    request_timeout: float = Field(default=15.0, gt=0)
    fetch_delay: float = Field(default=1.0, ge=0)
    max_pages: int = Field(default=256, ge=1)
    api_cors_allowed_origins: list[str] = Field(default_factory=list)
    log_level: str = "INFO"

    @classmethod
    def load(cls) -> Settings:
        """Build a fresh Settings instance from the current environment."""
        return cls()

    @property
    def api_key_configured(self) -> bool:
        return bool(self.google_api_key and self.google_api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings."""
    return Settings.load()
