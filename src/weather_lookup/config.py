"""
Application settings.

Values come from environment variables or a local ``.env`` file, e.g.::

    OPENWEATHER_API_KEY=...
    TIMEZONE=Europe/London
"""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the CLI, flow and local server."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "weather-lookup"
    app_env: str = "development"
    debug: bool = False
    api_port: int = 8000

    openweather_api_key: str = Field(default="", repr=False)
    # None uses the public OpenWeatherMap 2.5 endpoint
    openweather_base_url: str | None = None

    # IANA zone name; None renders timestamps in the runtime's local time
    timezone: str | None = None
    site_dir: Path = Path("site")

    @property
    def display_tz(self) -> tzinfo | None:
        """Timezone used for timestamps and daily grouping."""
        return ZoneInfo(self.timezone) if self.timezone else None


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
