"""Weather Trends - historical weather summaries and trend insights by city.

Architecture::

    datasources/   External APIs (Open-Meteo geocoding + archive)
    analysis/      Pure analytics (daily records, summary, trend, moving average)
    renderers/     Pure data -> HTML (KPI cards, daily table, SVG combo chart)
    api/           FastAPI app serving /health and /api/weather
    flows/         Prefect orchestration (report: fetch, analyze, render, write)
    services/      Shared utilities (HTTP session with default timeout)

Data flow: city -> geocoding -> archive -> analysis -> (api JSON | renderers)

Extension points (see each package's docstring for step-by-step guides):
  - New data source:   datasources/__init__.py
  - New analysis:      analysis/__init__.py
  - New UI module:     renderers/__init__.py
"""

__version__ = "0.1.0"

from weather_trends.config import Settings
from weather_trends.schemas import WeatherResponse

__all__ = ["Settings", "WeatherResponse", "__version__"]
