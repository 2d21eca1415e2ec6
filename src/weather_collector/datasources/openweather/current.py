"""Current conditions from the OpenWeatherMap Current Weather API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_collector.datasources.openweather.client import OPENWEATHER_API, UNITS
from weather_collector.schemas import ReadingSource, WeatherReading
from weather_collector.services.http import session as default_session

if TYPE_CHECKING:
    import requests


def fetch_current_weather(
    city: str,
    api_key: str,
    *,
    session: requests.Session | None = None,
) -> dict[str, Any]:
    """
    Fetch current weather for a city from OpenWeatherMap.

    Args:
        city: City name, e.g. ``"Bangkok"``.
        api_key: OpenWeatherMap API key.
        session: HTTP session to use (defaults to the shared module session).

    Returns:
        Raw API response dict with ``main``, ``wind``, ``clouds`` and ``weather`` keys.

    Raises:
        requests.RequestException: On network errors or a non-2xx response.
    """
    params: dict[str, str] = {
        "q": city,
        "appid": api_key,
        "units": UNITS,
    }
    resp = (session or default_session).get(OPENWEATHER_API, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return result


def parse_current_weather(data: dict[str, Any]) -> WeatherReading:
    """
    Map an OpenWeatherMap response body to a ``WeatherReading``.

    Only the first entry of ``weather`` is used for the description.

    Raises:
        KeyError, IndexError, TypeError: If a required field is missing.
        pydantic.ValidationError: If a value is not a finite number.
    """
    main = data["main"]
    return WeatherReading(
        temperature=main["temp"],
        humidity=main["humidity"],
        pressure=main["pressure"],
        wind_speed=data["wind"]["speed"],
        cloudiness=data["clouds"]["all"],
        description=data["weather"][0]["description"],
        feels_like=main["feels_like"],
        source=ReadingSource.LIVE,
    )
