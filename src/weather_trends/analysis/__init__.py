"""Analytics over daily archive data.

Pure functions that turn datasource models into the response schema.
This is the domain logic layer.

Dependency rule: analysis/ imports datasource *models* and schemas only.
It never fetches data or produces HTML.

Modules:
  - trends: daily arrays -> records, summary, trend, full WeatherResponse
  - smoothing: trailing moving average used by the chart renderer

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function::

       from weather_trends.schemas import DailyRecord

       def compute_something(records: Sequence[DailyRecord]) -> Something:
           ...

2. Rules:
   - Import datasource *models* only (never call fetch functions here).
   - No I/O, no HTTP, no Prefect decorators.
   - Return pydantic models or plain values that renderers can consume.

3. Wire into ``build_response`` (API + report) or a renderer.

4. Re-export in ``__init__.py`` and add tests in ``tests/test_{name}.py``.
"""

from weather_trends.analysis.smoothing import DEFAULT_WINDOW, daily_mean_temps, moving_average
from weather_trends.analysis.trends import (
    build_response,
    classify_change,
    compute_summary,
    compute_trend,
    normalize_records,
)

__all__ = [
    "DEFAULT_WINDOW",
    "build_response",
    "classify_change",
    "compute_summary",
    "compute_trend",
    "daily_mean_temps",
    "moving_average",
    "normalize_records",
]
