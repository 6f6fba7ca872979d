"""Open-Meteo geocoding data source.

Resolves a city name to coordinates and a display name (free, no API key).

Public API:
  - search: geocode_city, pick_best_candidate, format_display_name
  - models: GeoCandidate, GeoResult
  - client: API URL, search constants
"""

from weather_trends.datasources.geocoding.client import GEOCODING_API
from weather_trends.datasources.geocoding.models import GeoCandidate, GeoResult
from weather_trends.datasources.geocoding.search import (
    format_display_name,
    geocode_city,
    pick_best_candidate,
)

__all__ = [
    "GEOCODING_API",
    "GeoCandidate",
    "GeoResult",
    "format_display_name",
    "geocode_city",
    "pick_best_candidate",
]
