"""Value formatting helpers for renderers.

Pure conversion functions with no external dependencies.
"""

from __future__ import annotations

import math

# Shown wherever a value is missing
DASH = "—"


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def num_or_dash(value: float | int | None, suffix: str = "") -> str:
    """Format a number for display, or an em dash for missing/non-finite values."""
    if value is None:
        return DASH
    if isinstance(value, float) and not math.isfinite(value):
        return DASH
    return f"{value}{suffix}"


def signed(value: float | None, suffix: str = "") -> str:
    """Format a change with an explicit sign, e.g. ``+1.25``."""
    if value is None or not math.isfinite(value):
        return DASH
    return f"{value:+.2f}{suffix}"
