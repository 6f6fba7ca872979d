"""
Prefect flow for building a static weather-trends report.

Geocodes the city, fetches the archive, runs the analytics, and writes the
rendered dashboard to ``<site_dir>/index.html``.

Run locally:
    python -m weather_trends.flows.report Toronto 2024-01-01 2024-01-31
"""

from __future__ import annotations

import sys
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

from prefect import flow, task

from weather_trends.analysis.trends import build_response
from weather_trends.api.validation import (
    WeatherQueryError,
    city_not_found,
    parse_weather_query,
)
from weather_trends.config import get_settings
from weather_trends.datasources import geocoding, weather
from weather_trends.datasources.geocoding import GeoResult
from weather_trends.datasources.weather import DailyWeather
from weather_trends.renderers.dashboard import build_dashboard_html
from weather_trends.schemas import WeatherResponse


@task(name="geocode")
def geocode(city: str) -> GeoResult | None:
    """Resolve the city name to coordinates."""
    return geocoding.geocode_city(city)


@task(name="fetch-archive")
def fetch_archive(geo: GeoResult, start: date, end: date) -> DailyWeather:
    """Fetch daily archive data for the resolved location."""
    return weather.fetch_daily_archive(geo.latitude, geo.longitude, start, end)


@task(name="analyze")
def analyze(geo: GeoResult, daily: DailyWeather, start: date, end: date) -> WeatherResponse:
    """Turn the raw arrays into the summary response."""
    return build_response(geo.display_name, geo, daily, start, end)


@task(name="render-dashboard")
def render_dashboard(response: WeatherResponse, window: int) -> str:
    """Render the full dashboard page."""
    return build_dashboard_html(response, datetime.now(UTC), window=window)


@task(name="write-site")
def write_site(html: str, site_dir: Path) -> Path:
    """Write HTML to the site directory."""
    site_dir.mkdir(parents=True, exist_ok=True)
    output_path = site_dir / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="weather-report", log_prints=True)
def build_report(
    city: str,
    start: str,
    end: str,
    site_dir: Path | None = None,
) -> dict[str, Any]:
    """
    Build a static dashboard for one city and date range.

    Returns ``{"error": ...}`` for invalid input or an unknown city, without
    writing anything.  Upstream HTTP failures propagate.
    """
    settings = get_settings()
    site_dir = site_dir or settings.site_dir

    try:
        query = parse_weather_query(city, start, end, max_range_days=settings.max_range_days)
    except WeatherQueryError as exc:
        print(f"Invalid request: {exc.message}")
        return {"error": exc.message}

    print(f"Geocoding {query.city!r}...")
    geo = geocode(query.city)
    if geo is None:
        message = city_not_found(city).message
        print(message)
        return {"error": message}

    print(f"Fetching archive for {geo.display_name} ({query.start} to {query.end})...")
    daily = fetch_archive(geo, query.start, query.end)

    print(f"Analyzing {len(daily)} days...")
    response = analyze(geo, daily, query.start, query.end)

    print("Rendering dashboard...")
    html = render_dashboard(response, settings.moving_average_window)

    output_path = write_site(html, site_dir)
    print(f"Report written: {output_path}")
    return {"city": response.city, "days": len(response.daily), "output": str(output_path)}


if __name__ == "__main__":
    result = build_report(*sys.argv[1:4])
    print(f"Flow complete: {result}")
