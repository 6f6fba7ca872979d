"""Open-Meteo weather archive data source.

Fetches historical daily max/min temperature and precipitation sums
(free, no API key).

Public API:
  - historical: fetch_daily_archive (archive API for past dates)
  - models: DailyWeather (raw parallel arrays)
  - client: API URL, requested variables
"""

from weather_trends.datasources.weather.client import DAILY_VARS, OPEN_METEO_HISTORICAL
from weather_trends.datasources.weather.historical import fetch_daily_archive
from weather_trends.datasources.weather.models import DailyWeather

__all__ = [
    "DAILY_VARS",
    "OPEN_METEO_HISTORICAL",
    "DailyWeather",
    "fetch_daily_archive",
]
