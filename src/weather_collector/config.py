"""
Application settings.

Loaded once from environment variables (and an optional ``.env`` file) and
passed explicitly to every component. Settings are frozen after load.

Usage::

    from weather_collector.config import get_settings

    settings = get_settings()
    print(settings.city, settings.interval_seconds)
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CITY = "Bangkok"
DEFAULT_INTERVAL_MS = 300_000  # 5 minutes
DEFAULT_WARMUP_MS = 10_000


class Settings(BaseSettings):
    """Collector configuration, one field per environment variable."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app_name: str = "weather-collector"
    app_env: str = "development"
    debug: bool = False

    # InfluxDB
    influxdb_url: str = "http://localhost:8086"
    influxdb_token: str | None = None
    influxdb_org: str | None = None
    influxdb_bucket: str | None = None

    # OpenWeatherMap
    openweather_api_key: str | None = None
    city: str = DEFAULT_CITY
    http_timeout: float = Field(default=30, gt=0, description="HTTP timeout in seconds")

    # Scheduling (milliseconds, matching the INTERVAL env var convention)
    interval: int = Field(default=DEFAULT_INTERVAL_MS, gt=0, description="Poll interval in ms")
    warmup_delay: int = Field(default=DEFAULT_WARMUP_MS, ge=0, description="Startup delay in ms")

    # Persist live/mock provenance as a `source` tag
    tag_source: bool = False

    @property
    def interval_seconds(self) -> float:
        """Poll interval in seconds."""
        return self.interval / 1000

    @property
    def warmup_seconds(self) -> float:
        """Warm-up delay in seconds."""
        return self.warmup_delay / 1000

    @property
    def has_api_key(self) -> bool:
        """Whether a non-empty OpenWeatherMap key is configured."""
        return bool(self.openweather_api_key and self.openweather_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()
