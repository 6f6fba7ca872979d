"""HTTP API: FastAPI app plus the query validation it shares with flows/."""

from weather_trends.api.app import create_app
from weather_trends.api.validation import (
    WeatherQuery,
    WeatherQueryError,
    parse_weather_query,
)

__all__ = ["WeatherQuery", "WeatherQueryError", "create_app", "parse_weather_query"]
