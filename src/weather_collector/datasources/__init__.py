"""Weather data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch / generate functions

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``synthetic/`` for a minimal example, ``openweather/`` for an HTTP one.

2. Return a ``WeatherReading`` (or a raw dict plus a parse function)::

       def fetch_something(city: str) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire it into ``source.WeatherSource`` so failures fall back to synthetic data.

5. Add tests in ``tests/test_{name}.py``.
"""
