from __future__ import annotations

from brightlight.errors import ScaleError


def _check_maximum(maximum: int) -> None:
    if maximum <= 0:
        raise ScaleError("Maximum brightness is zero, cannot convert to a percentage.")


def to_percentage(raw: int, maximum: int) -> int:
    _check_maximum(maximum)
    return raw * 100 // maximum


def from_percentage(pct: int, maximum: int) -> int:
    """Convert a 0-100 value to the raw scale.

    Both directions truncate, so raw -> pct -> raw can lose up to
    maximum / 100 steps.
    """

    _check_maximum(maximum)
    return pct * maximum // 100
