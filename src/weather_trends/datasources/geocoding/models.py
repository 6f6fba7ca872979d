"""Geocoding data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GeoCandidate:
    """A single place returned by the geocoding search."""

    name: str
    latitude: float
    longitude: float
    country_code: str = ""
    admin1: str | None = None
    population: int | None = None

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> GeoCandidate:
        """Parse one entry of the ``results`` array."""
        return cls(
            name=item.get("name", ""),
            latitude=float(item["latitude"]),
            longitude=float(item["longitude"]),
            country_code=item.get("country_code") or "",
            admin1=item.get("admin1"),
            population=item.get("population"),
        )


@dataclass(frozen=True)
class GeoResult:
    """Resolved coordinates and the human-readable place name."""

    latitude: float
    longitude: float
    display_name: str
