"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import date


def date_range_label(date_start: str, date_end: str) -> str:
    """Range label from ISO date strings, e.g. ``2024-01-01 → 2024-01-31``.

    Falls back to ``all dates`` when either end is missing.
    """
    if not date_start or not date_end:
        return "all dates"
    return f"{date_start} → {date_end}"


def short_date(iso_date: str) -> str:
    """Compact axis label, e.g. ``Jan 5``.  Unparsable input is returned as-is."""
    try:
        d = date.fromisoformat(iso_date)
    except ValueError:
        return iso_date
    return f"{d.strftime('%b')} {d.day}"
