"""Temperature + precipitation combo chart as inline SVG.

Precipitation bars share the x axis with min/max temperature lines and a
dashed trailing moving average of the daily mean temperature.  Temperature
uses the left axis, precipitation the right.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from weather_trends.analysis.smoothing import DEFAULT_WINDOW, daily_mean_temps, moving_average
from weather_trends.renderers import render_template
from weather_trends.renderers.date_utils import short_date

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from weather_trends.schemas import WeatherResponse

# SVG layout
SVG_WIDTH = 760
SVG_HEIGHT = 340
MARGIN_LEFT = 50
MARGIN_RIGHT = 55
MARGIN_TOP = 20
MARGIN_BOTTOM = 30

# Axis labelling
Y_TICKS = 5
MAX_X_LABELS = 7
BAR_FILL = 0.85  # share of each day's slot covered by its bar


def build_chart_html(response: WeatherResponse, window: int = DEFAULT_WINDOW) -> str:
    """Build the combo chart HTML for one response.

    Args:
        response: Analytics output with the daily records.
        window: Moving-average window over the daily mean temperature.

    Returns:
        Rendered HTML string with inline SVG chart, or a placeholder when
        there are no records.
    """
    records = response.daily
    if not records:
        return render_template("combo_chart.html.j2", empty=True)

    n = len(records)
    plot_right = SVG_WIDTH - MARGIN_RIGHT
    plot_bottom = SVG_HEIGHT - MARGIN_BOTTOM
    plot_width = plot_right - MARGIN_LEFT
    plot_height = plot_bottom - MARGIN_TOP
    slot = plot_width / n

    t_max = [r.t_max for r in records]
    t_min = [r.t_min for r in records]
    precip = [r.precip_mm for r in records]
    smoothed = moving_average(daily_mean_temps(records), window)

    temp_values = t_max + t_min + [v for v in smoothed if v is not None]
    t_lo, t_hi = _temp_axis_range(min(temp_values), max(temp_values))
    p_hi = _round_up_nice(max(precip))

    def x_center(i: int) -> float:
        """Centre of day ``i``'s slot."""
        return MARGIN_LEFT + (i + 0.5) * slot

    def y_for_temp(value: float) -> float:
        return plot_bottom - (value - t_lo) / (t_hi - t_lo) * plot_height

    def y_for_precip(value: float) -> float:
        return plot_bottom - value / p_hi * plot_height

    bar_width = slot * BAR_FILL
    bars = []
    for i, r in enumerate(records):
        top = y_for_precip(r.precip_mm)
        bars.append(
            {
                "x": round(x_center(i) - bar_width / 2, 1),
                "y": round(top, 1),
                "width": round(bar_width, 1),
                "height": round(plot_bottom - top, 1),
                "title": f"{r.date}: {r.precip_mm} mm",
            }
        )

    temp_ticks = []
    precip_ticks = []
    for i in range(Y_TICKS + 1):
        t_val = t_lo + (t_hi - t_lo) * i / Y_TICKS
        p_val = p_hi * i / Y_TICKS
        temp_ticks.append({"y": round(y_for_temp(t_val), 1), "label": f"{t_val:.0f}"})
        precip_ticks.append({"y": round(y_for_precip(p_val), 1), "label": _fmt_tick(p_val)})

    step = max(1, math.ceil(n / MAX_X_LABELS))
    x_labels = [
        {"x": round(x_center(i), 1), "text": short_date(records[i].date)}
        for i in range(0, n, step)
    ]

    return render_template(
        "combo_chart.html.j2",
        empty=False,
        svg_width=SVG_WIDTH,
        svg_height=SVG_HEIGHT,
        margin_left=MARGIN_LEFT,
        margin_top=MARGIN_TOP,
        plot_right=plot_right,
        plot_bottom=plot_bottom,
        bars=bars,
        temp_ticks=temp_ticks,
        precip_ticks=precip_ticks,
        x_labels=x_labels,
        t_max_points=_build_polyline(t_max, x_center, y_for_temp),
        t_min_points=_build_polyline(t_min, x_center, y_for_temp),
        avg_points=_build_polyline(smoothed, x_center, y_for_temp),
        window=window,
        day_count=n,
    )


def _build_polyline(
    values: Sequence[float | None],
    x_fn: Callable[[int], float],
    y_fn: Callable[[float], float],
) -> str:
    """Build SVG polyline points, skipping missing values."""
    points = []
    for i, value in enumerate(values):
        if value is None:
            continue
        points.append(f"{x_fn(i):.1f},{y_fn(value):.1f}")
    return " ".join(points)


def _temp_axis_range(lo: float, hi: float) -> tuple[float, float]:
    """Expand a temperature range outwards to multiples of 5 degrees."""
    axis_lo = math.floor(lo / 5) * 5
    axis_hi = math.ceil(hi / 5) * 5
    if axis_hi <= axis_lo:
        axis_hi = axis_lo + 5
    return float(axis_lo), float(axis_hi)


def _round_up_nice(value: float) -> float:
    """Round a precipitation maximum up to a 'nice' number for axis scaling."""
    if value <= 0:
        return 10.0
    nice_steps = [1, 2, 5, 10, 20, 25, 50, 75, 100, 150, 200, 300, 500]
    for step in nice_steps:
        if step >= value:
            return float(step)
    return float(int(value / 100 + 1) * 100)


def _fmt_tick(value: float) -> str:
    """Tick label without a trailing ``.0`` for whole numbers."""
    return f"{value:.0f}" if value == int(value) else f"{value:.1f}"
