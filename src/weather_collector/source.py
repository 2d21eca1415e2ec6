"""Live-or-mock weather source.

``WeatherSource.fetch()`` always returns a reading. A missing API key goes
straight to the synthetic generator without touching the network; any failure
of the live call (network, HTTP status, malformed body) is logged and replaced
by a synthetic reading. There is no retry.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from weather_collector.datasources.openweather import fetch_current_weather, parse_current_weather
from weather_collector.datasources.synthetic import generate_reading
from weather_collector.services.http import create_session

if TYPE_CHECKING:
    import random

    import requests

    from weather_collector.config import Settings
    from weather_collector.schemas import WeatherReading

logger = logging.getLogger(__name__)


class WeatherSource:
    """Fetches current weather for one city, falling back to synthetic data."""

    def __init__(
        self,
        city: str,
        api_key: str | None = None,
        *,
        session: requests.Session | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.city = city
        self.api_key = api_key.strip() if api_key else None
        self.session = session
        self.rng = rng

    @classmethod
    def from_settings(cls, settings: Settings) -> WeatherSource:
        """Build a source with its own session using the configured timeout."""
        return cls(
            settings.city,
            settings.openweather_api_key,
            session=create_session(timeout=settings.http_timeout),
        )

    def fetch(self) -> WeatherReading:
        """Return live weather if possible, otherwise a synthetic reading."""
        if not self.api_key:
            logger.warning("No valid OpenWeather API key provided. Using mock data...")
            return self.generate()

        try:
            data = fetch_current_weather(self.city, self.api_key, session=self.session)
            return parse_current_weather(data)
        except Exception as exc:  # noqa: BLE001
            logger.error("Error fetching weather data for %s: %s", self.city, exc)
            logger.info("Using mock data instead...")
            return self.generate()

    def generate(self) -> WeatherReading:
        """Synthetic reading from this source's random generator."""
        return generate_reading(self.rng)
