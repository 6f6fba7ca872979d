"""Tests for the dashboard renderers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from weather_trends.analysis.trends import build_response
from weather_trends.datasources.geocoding import GeoResult
from weather_trends.datasources.weather import DailyWeather
from weather_trends.renderers.chart import _round_up_nice, _temp_axis_range, build_chart_html
from weather_trends.renderers.dashboard import (
    build_daily_table_html,
    build_dashboard_html,
    build_summary_html,
)
from weather_trends.renderers.date_utils import date_range_label, short_date
from weather_trends.renderers.format_utils import DASH, c_to_f, num_or_dash, signed
from weather_trends.schemas import WeatherResponse

GEO = GeoResult(latitude=51.5085, longitude=-0.1257, display_name="London, England, GB")


def make_response(days: int = 8) -> WeatherResponse:
    daily = DailyWeather(
        time=tuple(f"2024-04-{i:02d}" for i in range(1, days + 1)),
        temp_max=tuple(12.0 + i for i in range(days)),
        temp_min=tuple(4.0 + i / 2 for i in range(days)),
        precip_sum=tuple(float(i % 3) for i in range(days)),
    )
    return build_response(
        GEO.display_name, GEO, daily, date(2024, 4, 1), date(2024, 4, days)
    )


def empty_response() -> WeatherResponse:
    return build_response(GEO.display_name, GEO, DailyWeather(), date(2024, 4, 1), date(2024, 4, 2))


class TestFormatUtils:
    @pytest.mark.parametrize(
        ("celsius", "fahrenheit"),
        [(0, 32.0), (100, 212.0), (-40, -40.0)],
    )
    def test_c_to_f(self, celsius: float, fahrenheit: float) -> None:
        assert c_to_f(celsius) == fahrenheit

    def test_num_or_dash(self) -> None:
        assert num_or_dash(None) == DASH
        assert num_or_dash(float("nan")) == DASH
        assert num_or_dash(3.5) == "3.5"
        assert num_or_dash(0) == "0"
        assert num_or_dash(2.0, " mm") == "2.0 mm"

    def test_signed(self) -> None:
        assert signed(1.5) == "+1.50"
        assert signed(-0.25) == "-0.25"
        assert signed(None) == DASH


class TestDateUtils:
    def test_date_range_label(self) -> None:
        assert date_range_label("2024-01-01", "2024-01-31") == "2024-01-01 → 2024-01-31"

    def test_date_range_label_missing(self) -> None:
        assert date_range_label("", "2024-01-31") == "all dates"

    def test_short_date(self) -> None:
        assert short_date("2024-01-05") == "Jan 5"

    def test_short_date_unparsable(self) -> None:
        assert short_date("d1") == "d1"


class TestSummaryHtml:
    def test_contains_kpis(self) -> None:
        response = make_response()
        html = build_summary_html(response)

        assert "London, England, GB" in html
        assert "2024-04-01 → 2024-04-08" in html
        assert "Avg Temp" in html
        assert "Rainy Days" in html
        assert str(response.summary.total_precip_mm) in html
        assert "warming" in html
        assert "trend-warming" in html

    def test_avg_temp_fahrenheit_note(self) -> None:
        response = make_response()
        avg_c = response.summary.avg_temp_c
        assert avg_c is not None

        html = build_summary_html(response)
        assert f"{c_to_f(avg_c):.1f} °F" in html

    def test_no_fahrenheit_note_without_data(self) -> None:
        assert "°F" not in build_summary_html(empty_response())

    def test_missing_values_render_dash(self) -> None:
        html = build_summary_html(empty_response())
        assert DASH in html
        assert "trend-" not in html

    def test_city_is_escaped(self) -> None:
        geo = GeoResult(latitude=0, longitude=0, display_name="<script>x</script>")
        response = build_response(
            geo.display_name, geo, DailyWeather(), date(2024, 1, 1), date(2024, 1, 1)
        )
        html = build_summary_html(response)
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestDailyTableHtml:
    def test_rows(self) -> None:
        html = build_daily_table_html(make_response(5))

        assert "5 days" in html
        assert "2024-04-01" in html
        assert "2024-04-05" in html
        assert html.count('class="rainy"') == 3  # precip 0, 1, 2, 0, 1

    def test_empty(self) -> None:
        html = build_daily_table_html(empty_response())
        assert "No daily data" in html


class TestChartHtml:
    def test_svg_elements(self) -> None:
        html = build_chart_html(make_response(8))

        assert "<svg" in html
        assert html.count("<rect") == 8
        assert 'class="t-max"' in html
        assert 'class="t-min"' in html
        assert 'class="t-avg"' in html
        assert "7-day avg" in html
        assert "Apr 1" in html

    def test_custom_window(self) -> None:
        html = build_chart_html(make_response(8), window=3)
        assert "3-day avg" in html
        assert "Avg Temp (3d MA)" in html

    def test_empty(self) -> None:
        html = build_chart_html(empty_response())
        assert "<svg" not in html
        assert "No daily data" in html

    def test_x_labels_capped(self) -> None:
        html = build_chart_html(make_response(28))
        assert html.count('text-anchor="middle"') <= 7

    def test_round_up_nice(self) -> None:
        assert _round_up_nice(0) == 10.0
        assert _round_up_nice(0.4) == 1.0
        assert _round_up_nice(7.2) == 10.0
        assert _round_up_nice(640) == 700.0

    def test_temp_axis_range(self) -> None:
        assert _temp_axis_range(-3.2, 17.8) == (-5.0, 20.0)
        assert _temp_axis_range(10.0, 10.0) == (10.0, 15.0)


class TestDashboardHtml:
    def test_full_page(self) -> None:
        html = build_dashboard_html(make_response(), datetime(2024, 5, 1, 9, 30))

        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Weather Trends: London, England, GB</title>" in html
        assert "Generated 2024-05-01 09:30" in html
        assert "<svg" in html
        assert "Daily data" in html
