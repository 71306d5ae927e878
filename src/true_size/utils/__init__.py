"""Numeric helpers for the true_size engine."""

from .geometry import MAX_LATITUDE, LonLat, clamp
from .vector import EPSILON, Vec3, cross, dot, norm, normalize, to_lon_lat, to_vector

__all__ = [
    "MAX_LATITUDE",
    "EPSILON",
    "LonLat",
    "Vec3",
    "clamp",
    "cross",
    "dot",
    "norm",
    "normalize",
    "to_lon_lat",
    "to_vector",
]
