"""OpenWeatherMap current-weather data source.

Requires an API key (``OPENWEATHER_API_KEY``).

Public API:
  - current: fetch_current_weather (raw JSON), parse_current_weather (→ reading)
  - client: API URL, shared constants
"""

from weather_collector.datasources.openweather.client import OPENWEATHER_API, UNITS
from weather_collector.datasources.openweather.current import (
    fetch_current_weather,
    parse_current_weather,
)

__all__ = [
    "OPENWEATHER_API",
    "UNITS",
    "fetch_current_weather",
    "parse_current_weather",
]
