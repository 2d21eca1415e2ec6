"""InfluxDB point writer.

Turns a ``WeatherReading`` into one ``weather`` point tagged with the city and
writes it straight away (synchronous write API, then an explicit flush). The
store assigns the timestamp.

The writer owns the InfluxDB client for the life of the process. Use it as a
context manager so the client is released exactly once on shutdown::

    with PointWriter.from_settings(settings) as writer:
        writer.write(reading)

Write failures are logged and reported through ``Result``; they never raise.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from influxdb_client import InfluxDBClient, Point
from influxdb_client.client.write_api import SYNCHRONOUS

from weather_collector.schemas import Result

if TYPE_CHECKING:
    from types import TracebackType

    from weather_collector.config import Settings
    from weather_collector.schemas import WeatherReading

logger = logging.getLogger(__name__)

MEASUREMENT = "weather"

# Reading attributes written as float fields of the same name
FLOAT_FIELDS = (
    "temperature",
    "humidity",
    "pressure",
    "wind_speed",
    "cloudiness",
    "feels_like",
)


def to_point(reading: WeatherReading, city: str, *, tag_source: bool = False) -> Point:
    """
    Build the point for one reading.

    Numeric values are cast to ``float`` so the field type stays stable even when
    the provider returns integers (humidity, pressure).

    Args:
        reading: The reading to persist.
        city: Value of the ``city`` tag.
        tag_source: Also tag ``source=live|mock``.
    """
    point = Point(MEASUREMENT).tag("city", city)
    if tag_source:
        point = point.tag("source", reading.source.value)
    for name in FLOAT_FIELDS:
        point = point.field(name, float(getattr(reading, name)))
    return point.field("description", str(reading.description))


class PointWriter:
    """Writes weather points to one InfluxDB bucket."""

    def __init__(
        self,
        client: InfluxDBClient,
        bucket: str | None,
        org: str | None,
        city: str,
        *,
        tag_source: bool = False,
    ) -> None:
        self.client = client
        self.bucket = bucket
        self.org = org
        self.city = city
        self.tag_source = tag_source
        self._write_api = client.write_api(write_options=SYNCHRONOUS)
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> PointWriter:
        """Open a client against the configured InfluxDB instance."""
        client = InfluxDBClient(
            url=settings.influxdb_url,
            token=settings.influxdb_token,
            org=settings.influxdb_org,
        )
        return cls(
            client,
            settings.influxdb_bucket,
            settings.influxdb_org,
            settings.city,
            tag_source=settings.tag_source,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, reading: WeatherReading) -> Result:
        """Write one point and flush. Never raises."""
        try:
            point = to_point(reading, self.city, tag_source=self.tag_source)
            self._write_api.write(bucket=self.bucket, org=self.org, record=point)
            self._write_api.flush()
        except Exception as exc:  # noqa: BLE001
            logger.error("Error writing to InfluxDB: %s", exc)
            return Result(success=False, message="Write failed", error=str(exc))

        message = f"Weather data written: {reading.summary()}"
        logger.info(message)
        return Result(
            success=True,
            message=message,
            data={"city": self.city, "source": reading.source.value},
        )

    def close(self) -> None:
        """Release the write API and client. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        try:
            self._write_api.close()
        finally:
            self.client.close()
        logger.debug("InfluxDB client closed")

    def __enter__(self) -> PointWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
