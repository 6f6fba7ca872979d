"""
Domain models for weather trends.

Pydantic models for the analytics output.  These define the canonical JSON
schema served by the API: camelCase field names, and ``None`` fields are
dropped at the boundary (``model_dump(by_alias=True, exclude_none=True)``).
All models are frozen; a WeatherResponse is built once per request.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_FROZEN_CAMEL = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class TrendLabel(StrEnum):
    """Direction of the first-3 vs last-3 day mean temperature change."""

    WARMING = "warming"
    COOLING = "cooling"
    STABLE = "stable"


class DailyRecord(BaseModel):
    """One day of archive data, zero-filled where the upstream array was short."""

    model_config = _FROZEN_CAMEL

    date: str = Field(..., description="Calendar date, yyyy-MM-dd")
    t_min: float
    t_max: float
    precip_mm: float

    @property
    def mean_temp(self) -> float:
        """Per-day mean temperature ``(tMin + tMax) / 2``."""
        return (self.t_min + self.t_max) / 2.0


class Summary(BaseModel):
    """Aggregate statistics over the full record set."""

    model_config = _FROZEN_CAMEL

    avg_temp_c: float | None = None
    min_temp_c: float | None = None
    max_temp_c: float | None = None
    total_precip_mm: float = 0.0
    rainy_days: int = 0


class Trend(BaseModel):
    """Temperature direction plus the wettest day."""

    model_config = _FROZEN_CAMEL

    temp_change_c: float | None = None
    trend_label: TrendLabel | None = None
    most_rain_mm: float | None = None
    most_rain_date: str | None = None


class Coords(BaseModel):
    model_config = _FROZEN_CAMEL

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class DateRange(BaseModel):
    model_config = _FROZEN_CAMEL

    start: str
    end: str


class WeatherResponse(BaseModel):
    """Everything the dashboard needs for one city and date range."""

    model_config = _FROZEN_CAMEL

    city: str
    coords: Coords
    date_range: DateRange = Field(..., alias="range")
    daily: tuple[DailyRecord, ...] = ()
    summary: Summary = Field(default_factory=Summary)
    trends: Trend = Field(default_factory=Trend)

    def to_json_dict(self) -> dict[str, object]:
        """JSON-ready dict with camelCase keys and ``None`` fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
