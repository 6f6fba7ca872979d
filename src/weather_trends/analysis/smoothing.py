"""Trailing moving average for chart smoothing.

Independent of the trend computation, which always uses raw daily means.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weather_trends.schemas import DailyRecord

DEFAULT_WINDOW = 7

_CENTS = Decimal("0.01")


def round_half_up(value: float) -> float:
    """Round to 2 decimals, exact ties going away from zero.

    The Decimal is built from the float itself so the tie test sees its
    exact binary value, not its shortest repr.
    """
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def moving_average(
    values: Sequence[float | None],
    window: int = DEFAULT_WINDOW,
) -> list[float | None]:
    """Trailing moving average that skips missing values.

    For each index ``i`` the output is the mean of the non-null, finite
    values in ``values[max(0, i - window + 1) : i + 1]``, rounded half-up to
    2 decimals, or None if that slice has no usable value.  The first
    ``window - 1`` points use a partial window.

    Args:
        values: Series to smooth; None/NaN/inf entries are ignored.
        window: Number of points in the trailing window (>= 1).

    Raises:
        ValueError: If ``window`` is less than 1.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    out: list[float | None] = []
    for i in range(len(values)):
        valid = [
            v for v in values[max(0, i - window + 1) : i + 1] if v is not None and math.isfinite(v)
        ]
        out.append(round_half_up(sum(valid) / len(valid)) if valid else None)
    return out


def daily_mean_temps(records: Sequence[DailyRecord]) -> list[float]:
    """Per-day ``(tMin + tMax) / 2`` rounded half-up to 2 decimals, in record order."""
    return [round_half_up(r.mean_temp) for r in records]
