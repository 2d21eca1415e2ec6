"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from weather_collector.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

ENV_VARS = (
    "INFLUXDB_URL",
    "INFLUXDB_TOKEN",
    "INFLUXDB_ORG",
    "INFLUXDB_BUCKET",
    "OPENWEATHER_API_KEY",
    "CITY",
    "INTERVAL",
    "WARMUP_DELAY",
    "HTTP_TIMEOUT",
    "TAG_SOURCE",
    "APP_ENV",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def clean_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from the host environment and any local .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
