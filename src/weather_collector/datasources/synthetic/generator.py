"""Synthetic weather readings.

Used when the live provider is unconfigured or unavailable. Values jitter
uniformly around tropical baselines; the bounds are advisory and not validated
downstream.
"""

from __future__ import annotations

import random

from weather_collector.schemas import ReadingSource, WeatherReading

BASE_TEMP_C = 28.0
BASE_HUMIDITY = 70.0
BASE_PRESSURE_HPA = 1013.0

TEMP_JITTER_C = 3.0
HUMIDITY_JITTER = 10.0
PRESSURE_JITTER_HPA = 5.0

MAX_WIND_SPEED = 15.0  # m/s
MAX_CLOUDINESS = 100.0  # %

_rng = random.Random()

DESCRIPTIONS = (
    "clear sky",
    "few clouds",
    "scattered clouds",
    "broken clouds",
    "light rain",
)


def _jitter(rng: random.Random, base: float, spread: float) -> float:
    """``base`` plus a uniform offset in ``[-spread, spread]``."""
    return base + rng.uniform(-spread, spread)


def generate_reading(rng: random.Random | None = None) -> WeatherReading:
    """
    Generate one plausible reading.

    Args:
        rng: Random source (defaults to a shared module-level generator).
            Pass a seeded ``random.Random`` for reproducible output.

    Returns:
        A reading with ``source=mock``. ``feels_like`` is sampled
        independently of ``temperature``.
    """
    r = rng or _rng
    return WeatherReading(
        temperature=_jitter(r, BASE_TEMP_C, TEMP_JITTER_C),
        humidity=_jitter(r, BASE_HUMIDITY, HUMIDITY_JITTER),
        pressure=_jitter(r, BASE_PRESSURE_HPA, PRESSURE_JITTER_HPA),
        wind_speed=r.uniform(0, MAX_WIND_SPEED),
        cloudiness=r.uniform(0, MAX_CLOUDINESS),
        description=r.choice(DESCRIPTIONS),
        feels_like=_jitter(r, BASE_TEMP_C, TEMP_JITTER_C),
        source=ReadingSource.MOCK,
    )
