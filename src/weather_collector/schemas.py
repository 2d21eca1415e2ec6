"""
Domain models for the weather collector.

Pydantic models for readings and operation results.
Data sources normalize provider responses to ``WeatherReading``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Core
# =============================================================================


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None


# =============================================================================
# Weather
# =============================================================================


class ReadingSource(StrEnum):
    """Where a reading came from."""

    LIVE = "live"
    MOCK = "mock"


class WeatherReading(BaseModel):
    """Current weather for one city at one instant.

    Numeric fields must be finite; NaN and infinities are rejected.
    """

    model_config = {"frozen": True, "allow_inf_nan": False}

    temperature: float = Field(..., description="Air temperature (°C)")
    humidity: float = Field(..., description="Relative humidity (%)")
    pressure: float = Field(..., description="Sea-level pressure (hPa)")
    wind_speed: float = Field(..., description="Wind speed (m/s)")
    cloudiness: float = Field(..., description="Cloud cover (%)")
    description: str = Field(..., description="Short condition text, e.g. 'clear sky'")
    feels_like: float = Field(..., description="Apparent temperature (°C)")
    source: ReadingSource = ReadingSource.LIVE

    def summary(self) -> str:
        """One-line summary with rounded temperature and humidity."""
        return f"{self.temperature:.1f}°C, {self.humidity:.0f}% humidity"
