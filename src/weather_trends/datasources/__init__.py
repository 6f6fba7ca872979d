"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Dataclasses for API responses
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - geocoding: city name -> coordinates + display name (Open-Meteo geocoding)
  - weather: daily temperature/precipitation archive (Open-Meteo archive)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``weather/`` for a minimal example.

2. Write fetch functions that return dataclasses::

       from weather_trends.services.http import session

       def fetch_something(lat, lon) -> Something:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return Something.from_payload(resp.json())

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into the API route (``api/app.py``) and the report flow
   (``flows/report.py``).

5. Add tests in ``tests/test_{name}.py``.
"""
