"""Unit-sphere vector primitives used by the spherical rotation builder."""

import math
from typing import Tuple

from .geometry import LonLat

Vec3 = Tuple[float, float, float]

EPSILON = 1e-6


def to_vector(lon_lat: LonLat) -> Vec3:
    """Map a ``(lon, lat)`` pair in degrees onto the unit sphere."""
    lam = math.radians(lon_lat[0])
    phi = math.radians(lon_lat[1])
    cos_phi = math.cos(phi)
    return (cos_phi * math.cos(lam), cos_phi * math.sin(lam), math.sin(phi))


def to_lon_lat(vec: Vec3) -> LonLat:
    """Inverse of :func:`to_vector`; the input does not need to be unit length."""
    x, y, z = vec
    lon = math.degrees(math.atan2(y, x))
    lat = math.degrees(math.atan2(z, math.sqrt(x * x + y * y)))
    return (lon, lat)


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def norm(v: Vec3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def normalize(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length, or the zero vector if ``|v| < 1e-6``."""
    length = norm(v)
    if length < EPSILON:
        return (0.0, 0.0, 0.0)
    return (v[0] / length, v[1] / length, v[2] / length)


__all__ = [
    "EPSILON",
    "Vec3",
    "to_vector",
    "to_lon_lat",
    "cross",
    "dot",
    "norm",
    "normalize",
]
