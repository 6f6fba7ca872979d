"""Dashboard HTML renderers.

KPI summary cards, the daily data table, and the full page that stitches
them together with the combo chart.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_trends.analysis.smoothing import DEFAULT_WINDOW
from weather_trends.renderers import render_template
from weather_trends.renderers.chart import build_chart_html
from weather_trends.renderers.date_utils import date_range_label
from weather_trends.renderers.format_utils import DASH, c_to_f, num_or_dash, signed

if TYPE_CHECKING:
    from datetime import datetime

    from weather_trends.schemas import WeatherResponse


def _fahrenheit_note(celsius: float | None) -> str:
    if celsius is None:
        return ""
    return f"{c_to_f(celsius):.1f} °F"


def build_summary_html(response: WeatherResponse) -> str:
    """Build the header and KPI cards for one response."""
    summary = response.summary
    trends = response.trends

    wettest = DASH
    if trends.most_rain_date is not None:
        wettest = f"{trends.most_rain_date} ({num_or_dash(trends.most_rain_mm)} mm)"

    kpis = [
        {
            "title": "Avg Temp (°C)",
            "value": num_or_dash(summary.avg_temp_c),
            "note": _fahrenheit_note(summary.avg_temp_c),
        },
        {"title": "Min Temp (°C)", "value": num_or_dash(summary.min_temp_c)},
        {"title": "Max Temp (°C)", "value": num_or_dash(summary.max_temp_c)},
        {"title": "Total Precip (mm)", "value": num_or_dash(summary.total_precip_mm)},
        {"title": "Rainy Days", "value": num_or_dash(summary.rainy_days)},
        {
            "title": "Trend",
            "value": trends.trend_label.value if trends.trend_label else DASH,
            "css_class": f"trend-{trends.trend_label.value}" if trends.trend_label else "",
        },
        {"title": "Temp Change (°C)", "value": signed(trends.temp_change_c)},
        {"title": "Wettest Day", "value": wettest},
    ]

    return render_template(
        "summary.html.j2",
        city=response.city,
        range_label=date_range_label(response.date_range.start, response.date_range.end),
        lat=response.coords.lat,
        lon=response.coords.lon,
        kpis=kpis,
    )


def build_daily_table_html(response: WeatherResponse) -> str:
    """Build the per-day table (date, min, max, precipitation)."""
    rows = [
        {
            "date": r.date,
            "t_min": num_or_dash(r.t_min),
            "t_max": num_or_dash(r.t_max),
            "precip_mm": num_or_dash(r.precip_mm),
            "rainy": r.precip_mm > 0,
        }
        for r in response.daily
    ]
    return render_template("daily_table.html.j2", rows=rows, day_count=len(rows))


def build_dashboard_html(
    response: WeatherResponse,
    generated_at: datetime,
    window: int = DEFAULT_WINDOW,
) -> str:
    """Build the complete dashboard page.

    Args:
        response: Analytics output for one city and range.
        generated_at: Timestamp shown in the page footer.
        window: Moving-average window for the chart.

    Returns:
        Full HTML document.
    """
    return render_template(
        "base.html.j2",
        title=f"Weather Trends: {response.city}",
        updated=generated_at.strftime("%Y-%m-%d %H:%M"),
        summary_html=build_summary_html(response),
        chart_html=build_chart_html(response, window=window),
        daily_table_html=build_daily_table_html(response),
    )
