"""
Prefect flow for a single collection cycle.

Fetches current weather (live or mock) and writes one point to InfluxDB.
The long-running loop lives in ``collector.py``; this flow is for ad hoc runs
and Prefect deployments.

Run locally:
    python -m weather_collector.flows.collect

Run with Prefect dashboard:
    prefect server start &
    python -m weather_collector.flows.collect
"""

from __future__ import annotations

from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from weather_collector.config import get_settings
from weather_collector.schemas import Result, WeatherReading  # noqa: TC001
from weather_collector.source import WeatherSource
from weather_collector.store import PointWriter


# Inputs are live objects (session, client), so task caching is off.
@task(name="fetch-reading", cache_policy=NO_CACHE)
def fetch_reading(source: WeatherSource) -> WeatherReading:
    """Fetch current weather, falling back to synthetic data."""
    return source.fetch()


@task(name="write-reading", cache_policy=NO_CACHE)
def write_reading(writer: PointWriter, reading: WeatherReading) -> Result:
    """Write one reading as a point and flush."""
    return writer.write(reading)


@flow(name="collect-weather", log_prints=True)
def collect_weather(city: str | None = None) -> dict[str, Any]:
    """
    Run one fetch-then-write cycle.

    Args:
        city: Override the configured city for this run.

    Returns:
        Summary with the city, reading source, rounded values and write status.
    """
    settings = get_settings()
    if city:
        settings = settings.model_copy(update={"city": city})

    print(f"Collecting weather for {settings.city}...")
    source = WeatherSource.from_settings(settings)
    with PointWriter.from_settings(settings) as writer:
        reading = fetch_reading(source)
        result = write_reading(writer, reading)

    if result.success:
        print(result.message)
    else:
        print(f"Write failed: {result.error}")

    return {
        "city": settings.city,
        "source": reading.source.value,
        "temperature": round(reading.temperature, 1),
        "humidity": round(reading.humidity),
        "written": result.success,
    }


if __name__ == "__main__":
    summary = collect_weather()
    print(f"Flow complete: {summary}")
