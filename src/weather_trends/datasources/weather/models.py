"""Archive data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DailyWeather:
    """Daily archive arrays exactly as the provider returned them.

    The value arrays may be shorter than ``time`` (or contain ``None``);
    ``analysis.trends.normalize_records`` zero-fills those gaps.
    """

    time: tuple[str, ...] = ()
    temp_max: tuple[float | None, ...] = ()
    temp_min: tuple[float | None, ...] = ()
    precip_sum: tuple[float | None, ...] = ()

    def __len__(self) -> int:
        return len(self.time)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> DailyWeather:
        """Build from an archive response body (``{"daily": {...}}``)."""
        daily = data.get("daily") or {}
        time = daily.get("time")
        if not time:
            return cls()
        return cls(
            time=tuple(time),
            temp_max=tuple(daily.get("temperature_2m_max") or ()),
            temp_min=tuple(daily.get("temperature_2m_min") or ()),
            precip_sum=tuple(daily.get("precipitation_sum") or ()),
        )
