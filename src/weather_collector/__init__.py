"""Weather Collector - periodic weather sampling into InfluxDB.

Architecture::

    datasources/   Weather inputs (OpenWeatherMap client, synthetic generator)
    source.py      Live-or-mock adapter: fetch() never fails
    store.py       InfluxDB point writer (write + flush, owned resource)
    collector.py   Warm-up, then one cycle per interval tick (single-flight)
    flows/         Prefect orchestration (one collection cycle as a flow)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: collector → source (→ synthetic on failure) → reading → store

Extension points:
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from weather_collector.config import Settings  # noqa: E402
from weather_collector.schemas import ReadingSource, WeatherReading  # noqa: E402

__all__ = ["ReadingSource", "Settings", "WeatherReading", "__version__"]
