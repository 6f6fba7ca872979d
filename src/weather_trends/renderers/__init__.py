"""Pure rendering functions: structured data -> HTML strings.

All renderers follow the same pattern:
  - Input: a WeatherResponse (from analysis/)
  - Output: str (HTML fragment, not a full page)
  - No side effects, no I/O, no Prefect decorators

Used by flows/report.py which orchestrates the rendering pipeline.

Public API:
  - dashboard: build_summary_html, build_daily_table_html, build_dashboard_html
  - chart: build_chart_html
  - format_utils: c_to_f, num_or_dash
  - date_utils: date_range_label, short_date

Adding a renderer (UI module)
-----------------------------
1. Create ``renderers/{name}.py`` with a build function::

       from weather_trends.renderers import render_template

       def build_mywidget_html(response: WeatherResponse) -> str:
           rows = [...]
           return render_template("mywidget.html.j2", rows=rows)

2. Create a Jinja2 template in ``templates/{name}.html.j2``.
   Templates produce HTML fragments (no <html>/<body> tags).
   CSS goes in ``templates/base.html.j2`` within the <style> block.

3. Wire into ``build_dashboard_html`` in ``renderers/dashboard.py`` and add
   the ``{{ mywidget_html }}`` placeholder in ``base.html.j2``.

4. Add tests: call your build function with sample data and assert
   the returned HTML contains expected content.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
