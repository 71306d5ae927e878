"""Scalar helpers shared by the vector math and the geometry transforms."""

from typing import Tuple

LonLat = Tuple[float, float]

MAX_LATITUDE = 89.9


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return min(max(value, lo), hi)


__all__ = ["LonLat", "MAX_LATITUDE", "clamp"]
