"""
Tests for the report flow module.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

from weather_trends.datasources.geocoding import GeoResult
from weather_trends.datasources.weather import DailyWeather
from weather_trends.flows import report

if TYPE_CHECKING:
    from pathlib import Path

OSLO = GeoResult(latitude=59.91, longitude=10.75, display_name="Oslo, Oslo, NO")

DAILY = DailyWeather(
    time=("2024-02-01", "2024-02-02", "2024-02-03"),
    temp_max=(-1.0, 0.5, 2.0),
    temp_min=(-8.0, -6.5, -4.0),
    precip_sum=(0.0, 3.1, 0.2),
)


class TestTasks:
    """Each task on its own."""

    @patch("weather_trends.datasources.geocoding.geocode_city")
    def test_geocode(self, mock_geocode: Mock) -> None:
        mock_geocode.return_value = OSLO
        assert report.geocode("Oslo") == OSLO
        mock_geocode.assert_called_once_with("Oslo")

    @patch("weather_trends.datasources.weather.fetch_daily_archive")
    def test_fetch_archive(self, mock_fetch: Mock) -> None:
        mock_fetch.return_value = DAILY
        result = report.fetch_archive(OSLO, date(2024, 2, 1), date(2024, 2, 3))

        assert result == DAILY
        mock_fetch.assert_called_once_with(59.91, 10.75, date(2024, 2, 1), date(2024, 2, 3))

    def test_analyze(self) -> None:
        response = report.analyze(OSLO, DAILY, date(2024, 2, 1), date(2024, 2, 3))

        assert response.city == "Oslo, Oslo, NO"
        assert response.summary.rainy_days == 2
        assert response.trends.temp_change_c is None

    def test_write_site(self, tmp_path: Path) -> None:
        output = report.write_site("<p>hi</p>", tmp_path / "site")

        assert output == tmp_path / "site" / "index.html"
        assert output.read_text(encoding="utf-8") == "<p>hi</p>"


class TestBuildReport:
    """The whole flow with both adapters mocked."""

    @patch("weather_trends.datasources.weather.fetch_daily_archive")
    @patch("weather_trends.datasources.geocoding.geocode_city")
    def test_writes_dashboard(
        self, mock_geocode: Mock, mock_fetch: Mock, tmp_path: Path
    ) -> None:
        mock_geocode.return_value = OSLO
        mock_fetch.return_value = DAILY

        result = report.build_report("Oslo", "2024-02-01", "2024-02-03", site_dir=tmp_path)

        assert result == {
            "city": "Oslo, Oslo, NO",
            "days": 3,
            "output": str(tmp_path / "index.html"),
        }
        html = (tmp_path / "index.html").read_text(encoding="utf-8")
        assert "Oslo, Oslo, NO" in html
        assert "<svg" in html

    @patch("weather_trends.datasources.geocoding.geocode_city")
    def test_invalid_dates(self, mock_geocode: Mock, tmp_path: Path) -> None:
        result = report.build_report("Oslo", "2024-02-03", "2024-02-01", site_dir=tmp_path)

        assert result == {"error": "end must be >= start"}
        mock_geocode.assert_not_called()
        assert not (tmp_path / "index.html").exists()

    @patch("weather_trends.datasources.geocoding.geocode_city")
    def test_unknown_city(self, mock_geocode: Mock, tmp_path: Path) -> None:
        mock_geocode.return_value = None

        result = report.build_report("Atlantis", "2024-02-01", "2024-02-03", site_dir=tmp_path)

        assert result == {"error": "city not found: Atlantis"}
        assert not (tmp_path / "index.html").exists()
