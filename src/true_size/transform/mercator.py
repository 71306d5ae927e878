"""Apparent size change of a feature moved north or south on a Mercator map."""

from __future__ import annotations

import math

from ..models import SelectionDetails


def mercator_scale(original_lat: float, current_lat: float) -> float:
    """Return ``cos(original_lat) / cos(current_lat)`` for latitudes in degrees.

    The result is not clamped and grows without bound towards the poles.
    """
    numerator = math.cos(math.radians(original_lat))
    denominator = math.cos(math.radians(current_lat))
    if denominator == 0.0:
        return math.copysign(math.inf, numerator) if numerator else math.nan
    return numerator / denominator


def selection_details(original_lat: float, current_lat: float) -> SelectionDetails:
    return SelectionDetails(
        original_lat=original_lat,
        current_lat=current_lat,
        current_scale=mercator_scale(original_lat, current_lat),
    )


__all__ = ["mercator_scale", "selection_details"]
