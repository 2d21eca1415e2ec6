"""Synthetic weather data source (no I/O, no API key).

Public API:
  - generator: generate_reading, DESCRIPTIONS
"""

from weather_collector.datasources.synthetic.generator import DESCRIPTIONS, generate_reading

__all__ = ["DESCRIPTIONS", "generate_reading"]
