"""
FastAPI application for the weather dashboard.

Routes:
    GET /health       -> {"status": "ok"}
    GET /api/weather  -> WeatherResponse JSON (null fields omitted)

Run locally:
    weather-trends serve
"""

from __future__ import annotations

import logging

import requests
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_trends import __version__
from weather_trends.analysis.trends import build_response
from weather_trends.api.validation import (
    WeatherQueryError,
    city_not_found,
    parse_weather_query,
)
from weather_trends.config import Settings, get_settings
from weather_trends.datasources import geocoding, weather
from weather_trends.schemas import WeatherResponse

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API app.

    Args:
        settings: Overrides for tests; defaults to ``get_settings()``.
    """
    settings = settings or get_settings()
    app = FastAPI(title="Weather Trends API", version=__version__, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(WeatherQueryError)
    def handle_query_error(_request: Request, exc: WeatherQueryError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(requests.RequestException)
    def handle_upstream_error(request: Request, exc: requests.RequestException) -> JSONResponse:
        logger.error("Upstream request failed for %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": "upstream request failed"})

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/api/weather",
        response_model=WeatherResponse,
        response_model_by_alias=True,
        response_model_exclude_none=True,
    )
    def get_weather(
        city: str | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> WeatherResponse:
        query = parse_weather_query(city, start, end, max_range_days=settings.max_range_days)

        geo = geocoding.geocode_city(query.city)
        if geo is None:
            raise city_not_found(city or "")

        daily = weather.fetch_daily_archive(geo.latitude, geo.longitude, query.start, query.end)
        logger.info(
            "Fetched %d days for %s (%s to %s)", len(daily), geo.display_name, query.start, query.end
        )
        return build_response(geo.display_name, geo, daily, query.start, query.end)

    return app


#: Module-level app for ``uvicorn weather_trends.api.app:app``.
app = create_app()
