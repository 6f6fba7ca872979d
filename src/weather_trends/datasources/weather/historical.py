"""Historical daily weather from Open-Meteo Archive API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from weather_trends.datasources.weather.client import (
    DAILY_VARS,
    OPEN_METEO_HISTORICAL,
    TIMEZONE,
)
from weather_trends.datasources.weather.models import DailyWeather
from weather_trends.services.http import session

if TYPE_CHECKING:
    from datetime import date


def fetch_daily_archive(
    lat: float,
    lon: float,
    start: date,
    end: date,
) -> DailyWeather:
    """
    Fetch daily max/min temperature and precipitation for a date range.

    Args:
        lat: Latitude.
        lon: Longitude.
        start: First day (inclusive).
        end: Last day (inclusive).

    Returns:
        DailyWeather with the raw parallel arrays; empty if the response
        carries no ``daily.time`` array.

    Raises:
        requests.HTTPError: If the API request fails.
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "daily": ",".join(DAILY_VARS),
        "timezone": TIMEZONE,
    }
    resp = session.get(OPEN_METEO_HISTORICAL, params=params)
    resp.raise_for_status()
    result: dict[str, Any] = resp.json()
    return DailyWeather.from_payload(result)
