"""Tests for the OpenWeatherMap data source."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests
from pydantic import ValidationError

from weather_collector.datasources.openweather import (
    OPENWEATHER_API,
    fetch_current_weather,
    parse_current_weather,
)
from weather_collector.schemas import ReadingSource


def owm_body(**overrides: Any) -> dict[str, Any]:
    """A trimmed-down OpenWeatherMap current-weather response."""
    body: dict[str, Any] = {
        "weather": [
            {"id": 802, "main": "Clouds", "description": "scattered clouds"},
            {"id": 500, "main": "Rain", "description": "light rain"},
        ],
        "main": {
            "temp": 31.4,
            "feels_like": 36.2,
            "pressure": 1009,
            "humidity": 62,
        },
        "wind": {"speed": 3.6, "deg": 200},
        "clouds": {"all": 40},
        "name": "Bangkok",
    }
    body.update(overrides)
    return body


class TestFetchCurrentWeather:
    """Test the raw API call."""

    @patch("weather_collector.datasources.openweather.current.default_session.get")
    def test_request_params(self, mock_get: Mock) -> None:
        mock_response = Mock()
        mock_response.json.return_value = owm_body()
        mock_response.raise_for_status = Mock()
        mock_get.return_value = mock_response

        result = fetch_current_weather("Bangkok", "key-123")

        assert result["name"] == "Bangkok"
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args[0] == OPENWEATHER_API
        assert kwargs["params"] == {"q": "Bangkok", "appid": "key-123", "units": "metric"}

    def test_uses_given_session(self) -> None:
        session = Mock()
        session.get.return_value.json.return_value = owm_body()

        fetch_current_weather("Bangkok", "key-123", session=session)

        session.get.assert_called_once()

    def test_http_error_propagates(self) -> None:
        session = Mock()
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("401")

        with pytest.raises(requests.HTTPError):
            fetch_current_weather("Bangkok", "bad-key", session=session)


class TestParseCurrentWeather:
    """Test response-to-reading mapping."""

    def test_maps_fields(self) -> None:
        reading = parse_current_weather(owm_body())
        assert reading.temperature == 31.4
        assert reading.humidity == 62
        assert reading.pressure == 1009
        assert reading.wind_speed == 3.6
        assert reading.cloudiness == 40
        assert reading.feels_like == 36.2
        assert reading.source is ReadingSource.LIVE

    def test_uses_first_description(self) -> None:
        assert parse_current_weather(owm_body()).description == "scattered clouds"

    def test_integers_become_floats(self) -> None:
        reading = parse_current_weather(owm_body())
        assert isinstance(reading.humidity, float)
        assert isinstance(reading.cloudiness, float)

    def test_missing_section(self) -> None:
        body = owm_body()
        del body["wind"]
        with pytest.raises(KeyError):
            parse_current_weather(body)

    def test_empty_weather_list(self) -> None:
        with pytest.raises(IndexError):
            parse_current_weather(owm_body(weather=[]))

    def test_non_numeric_value(self) -> None:
        with pytest.raises(ValidationError):
            parse_current_weather(owm_body(clouds={"all": "lots"}))

    def test_non_finite_value(self) -> None:
        with pytest.raises(ValidationError):
            parse_current_weather(owm_body(wind={"speed": float("nan")}))
