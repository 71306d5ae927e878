"""Human readable labels for coordinates, scales and planet ratios."""

import math


def _format_angle(value: float, positive: str, negative: str) -> str:
    magnitude = abs(value)
    if magnitude < 0.05:
        return f"{magnitude:.1f}deg"
    direction = positive if value >= 0 else negative
    return f"{magnitude:.1f}deg{direction}"


def format_latitude(lat: float) -> str:
    return _format_angle(lat, "N", "S")


def format_longitude(lon: float) -> str:
    return _format_angle(lon, "E", "W")


def format_scale(scale: float) -> str:
    """Format a size multiplier as a whole percentage, e.g. ``2.0 -> "200%"``."""
    return f"{math.floor(scale * 100 + 0.5)}%"


def format_planet_ratio(ratio: float) -> str:
    digits = 1 if ratio >= 1 else 2
    return f"{ratio:.{digits}f}x Earth"


__all__ = [
    "format_latitude",
    "format_longitude",
    "format_scale",
    "format_planet_ratio",
]
