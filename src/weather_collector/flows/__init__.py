"""
Prefect flows.

Flows:
- collect: One fetch-then-write cycle (OpenWeatherMap or mock → InfluxDB)

Usage (local):
    python -m weather_collector.flows.collect

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'collect-weather/default'
"""
