"""Summary statistics and trend classification for daily archive data.

Turns the raw parallel arrays from the archive into immutable day records,
then derives the summary (averages, extremes, rain totals) and the trend
(last-3 vs first-3 day mean temperature, wettest day).

Everything here is pure: no I/O, and empty or short inputs produce
``None`` fields rather than errors.
"""

from __future__ import annotations

import statistics
from typing import TYPE_CHECKING

from weather_trends.schemas import (
    Coords,
    DailyRecord,
    DateRange,
    Summary,
    Trend,
    TrendLabel,
    WeatherResponse,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from weather_trends.datasources.geocoding import GeoResult
    from weather_trends.datasources.weather import DailyWeather

# Days at each end of the range compared for the trend
TREND_EDGE_DAYS = 3
MIN_TREND_RECORDS = 2 * TREND_EDGE_DAYS

# |change| above this many degrees C counts as warming/cooling
TREND_THRESHOLD_C = 0.5


def _value_at(values: Sequence[float | None], i: int) -> float:
    """Value at index ``i``, or 0.0 past the end of the array or for a null."""
    if i < len(values):
        v = values[i]
        if v is not None:
            return float(v)
    return 0.0


def normalize_records(daily: DailyWeather) -> list[DailyRecord]:
    """Build one DailyRecord per date, zero-filling short value arrays.

    Args:
        daily: Raw archive arrays; value arrays may be shorter than ``time``.

    Returns:
        Records in the provider's (ascending) date order.
    """
    return [
        DailyRecord(
            date=day,
            t_max=_value_at(daily.temp_max, i),
            t_min=_value_at(daily.temp_min, i),
            precip_mm=_value_at(daily.precip_sum, i),
        )
        for i, day in enumerate(daily.time)
    ]


def compute_summary(records: Sequence[DailyRecord]) -> Summary:
    """Average, extremes, and precipitation totals over all records."""
    rainy_days = sum(1 for r in records if r.precip_mm > 0)
    total_precip = round(sum(r.precip_mm for r in records), 2)
    if not records:
        return Summary(total_precip_mm=total_precip, rainy_days=rainy_days)

    return Summary(
        avg_temp_c=round(statistics.fmean(r.mean_temp for r in records), 2),
        min_temp_c=round(min(r.t_min for r in records), 2),
        max_temp_c=round(max(r.t_max for r in records), 2),
        total_precip_mm=total_precip,
        rainy_days=rainy_days,
    )


def classify_change(temp_change_c: float) -> TrendLabel:
    """Label a temperature change as warming, cooling, or stable."""
    if temp_change_c > TREND_THRESHOLD_C:
        return TrendLabel.WARMING
    if temp_change_c < -TREND_THRESHOLD_C:
        return TrendLabel.COOLING
    return TrendLabel.STABLE


def compute_trend(records: Sequence[DailyRecord]) -> Trend:
    """Compare the first and last three days, and find the wettest day.

    The middle of the range is ignored for the temperature comparison.
    Ties on precipitation go to the earliest date.
    """
    temp_change: float | None = None
    label: TrendLabel | None = None
    if len(records) >= MIN_TREND_RECORDS:
        first = statistics.fmean(r.mean_temp for r in records[:TREND_EDGE_DAYS])
        last = statistics.fmean(r.mean_temp for r in records[-TREND_EDGE_DAYS:])
        temp_change = round(last - first, 2)
        label = classify_change(temp_change)

    if not records:
        return Trend(temp_change_c=temp_change, trend_label=label)

    # max() returns the first maximal element, so earlier dates win ties
    wettest = max(records, key=lambda r: r.precip_mm)
    return Trend(
        temp_change_c=temp_change,
        trend_label=label,
        most_rain_mm=round(wettest.precip_mm, 2),
        most_rain_date=wettest.date,
    )


def build_response(
    city: str,
    geo: GeoResult,
    daily: DailyWeather,
    start: date,
    end: date,
) -> WeatherResponse:
    """Assemble the full response for one city and requested date range.

    Args:
        city: Display name to report (usually ``geo.display_name``).
        geo: Resolved coordinates.
        daily: Raw archive arrays.
        start: Requested first day.
        end: Requested last day.
    """
    records = normalize_records(daily)
    return WeatherResponse(
        city=city,
        coords=Coords(lat=geo.latitude, lon=geo.longitude),
        date_range=DateRange(start=start.isoformat(), end=end.isoformat()),
        daily=tuple(records),
        summary=compute_summary(records),
        trends=compute_trend(records),
    )
