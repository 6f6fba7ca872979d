"""City name search via the Open-Meteo geocoding API."""

from __future__ import annotations

from typing import Any

from weather_trends.datasources.geocoding.client import (
    GEOCODING_API,
    LANGUAGE,
    MAX_CANDIDATES,
)
from weather_trends.datasources.geocoding.models import GeoCandidate, GeoResult
from weather_trends.services.http import session


def pick_best_candidate(candidates: list[GeoCandidate]) -> GeoCandidate | None:
    """Return the most populous candidate, or None if there are none.

    Missing population counts as 0.  On equal population the earliest
    candidate wins (``max`` keeps the first maximal element).
    """
    if not candidates:
        return None
    return max(candidates, key=lambda c: c.population or 0)


def format_display_name(candidate: GeoCandidate) -> str:
    """Format as ``"Name, Region, CC"``, leaving out a blank region."""
    if candidate.admin1 and candidate.admin1.strip():
        return f"{candidate.name}, {candidate.admin1}, {candidate.country_code}"
    return f"{candidate.name}, {candidate.country_code}"


def geocode_city(city: str) -> GeoResult | None:
    """
    Resolve a free-text city name to coordinates.

    Args:
        city: City name as typed by the user (already trimmed).

    Returns:
        GeoResult for the best match, or None when nothing matched.

    Raises:
        requests.HTTPError: If the API request fails.
    """
    params: dict[str, str | int] = {
        "name": city,
        "count": MAX_CANDIDATES,
        "language": LANGUAGE,
        "format": "json",
    }
    resp = session.get(GEOCODING_API, params=params)
    resp.raise_for_status()
    data: dict[str, Any] = resp.json()

    candidates = [GeoCandidate.from_dict(item) for item in data.get("results") or []]
    best = pick_best_candidate(candidates)
    if best is None:
        return None

    return GeoResult(
        latitude=best.latitude,
        longitude=best.longitude,
        display_name=format_display_name(best),
    )
