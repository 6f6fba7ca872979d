"""Query-string validation for ``/api/weather``.

Shared by the API route and the report flow so both reject the same
inputs with the same messages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

# Strict yyyy-MM-dd; date.fromisoformat alone also accepts e.g. "20240105"
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DEFAULT_MAX_RANGE_DAYS = 370


class WeatherQueryError(Exception):
    """A rejected request, carrying the HTTP status and the user-facing message."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True)
class WeatherQuery:
    """A validated city + date range request."""

    city: str
    start: date
    end: date

    @property
    def span_days(self) -> int:
        return (self.end - self.start).days


def parse_date(value: str | None) -> date | None:
    """Parse a strict ``yyyy-MM-dd`` string, or return None."""
    if not value or not _ISO_DATE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def parse_weather_query(
    city: str | None,
    start: str | None,
    end: str | None,
    max_range_days: int = DEFAULT_MAX_RANGE_DAYS,
) -> WeatherQuery:
    """Validate raw query parameters.

    Args:
        city: City name; surrounding whitespace is trimmed.
        start: First day as ``yyyy-MM-dd``.
        end: Last day as ``yyyy-MM-dd``.
        max_range_days: Largest allowed ``end - start`` in days.

    Returns:
        The validated query.

    Raises:
        WeatherQueryError: With status 400 and the first failing rule.
    """
    if city is None or not city.strip():
        raise WeatherQueryError("city is required")

    start_date = parse_date(start)
    if start_date is None:
        raise WeatherQueryError("start must be yyyy-MM-dd")

    end_date = parse_date(end)
    if end_date is None:
        raise WeatherQueryError("end must be yyyy-MM-dd")

    if end_date < start_date:
        raise WeatherQueryError("end must be >= start")

    query = WeatherQuery(city=city.strip(), start=start_date, end=end_date)
    if query.span_days > max_range_days:
        raise WeatherQueryError(f"date range too large (max ~{max_range_days} days)")

    return query


def city_not_found(city: str) -> WeatherQueryError:
    """404 error for a city the geocoder could not resolve."""
    return WeatherQueryError(f"city not found: {city}", status_code=404)
