"""Rigid rotations of the sphere that carry one point onto another.

A drag gesture moves a feature's centroid from ``from_`` to ``to``. The
rotation built here turns the whole sphere about the axis perpendicular to
both points, so every vertex of the feature moves with its centroid and the
shape keeps its true angular size.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from ..utils import (
    EPSILON,
    LonLat,
    Vec3,
    clamp,
    cross,
    dot,
    norm,
    normalize,
    to_lon_lat,
    to_vector,
)

logger = logging.getLogger(__name__)

# Reference axes used when from/to are (anti)parallel and their cross product vanishes.
_FALLBACK_X: Vec3 = (1.0, 0.0, 0.0)
_FALLBACK_Y: Vec3 = (0.0, 1.0, 0.0)


@dataclass(frozen=True)
class SphericalRotation:
    """Rotation by ``angle`` radians about the unit vector ``axis``.

    Instances are callables mapping ``(lon, lat)`` to ``(lon, lat)`` using
    Rodrigues' rotation formula. A zero ``angle`` is the identity and hands
    the input back untouched.
    """

    axis: Vec3
    angle: float
    sin_angle: float
    cos_angle: float

    @classmethod
    def identity(cls) -> "SphericalRotation":
        return cls(axis=(0.0, 0.0, 0.0), angle=0.0, sin_angle=0.0, cos_angle=1.0)

    @classmethod
    def about(cls, axis: Vec3, angle: float) -> "SphericalRotation":
        return cls(
            axis=axis,
            angle=angle,
            sin_angle=math.sin(angle),
            cos_angle=math.cos(angle),
        )

    @property
    def is_identity(self) -> bool:
        return self.angle == 0.0

    def rotate_vector(self, vec: Vec3) -> Vec3:
        axis = self.axis
        cos_a = self.cos_angle
        sin_a = self.sin_angle
        one_minus_cos = 1.0 - cos_a
        axis_cross = cross(axis, vec)
        axis_dot = dot(axis, vec)
        return (
            vec[0] * cos_a + axis_cross[0] * sin_a + axis[0] * axis_dot * one_minus_cos,
            vec[1] * cos_a + axis_cross[1] * sin_a + axis[1] * axis_dot * one_minus_cos,
            vec[2] * cos_a + axis_cross[2] * sin_a + axis[2] * axis_dot * one_minus_cos,
        )

    def __call__(self, lon_lat: LonLat) -> LonLat:
        if self.is_identity:
            return lon_lat
        return to_lon_lat(self.rotate_vector(to_vector(lon_lat)))

    def matrix(self) -> np.ndarray:
        """Return the equivalent 3x3 rotation matrix."""
        if self.is_identity:
            return np.eye(3)
        k = np.asarray(self.axis, dtype=np.float64)
        k_cross = np.array(
            [
                [0.0, -k[2], k[1]],
                [k[2], 0.0, -k[0]],
                [-k[1], k[0], 0.0],
            ]
        )
        return (
            self.cos_angle * np.eye(3)
            + self.sin_angle * k_cross
            + (1.0 - self.cos_angle) * np.outer(k, k)
        )

    def rotate_array(self, lon_lat: np.ndarray) -> np.ndarray:
        """Rotate an ``(N, 2)`` array of ``(lon, lat)`` degrees in one pass.

        Columns past the second are dropped; the result is always ``(N, 2)``.
        """
        pts = np.asarray(lon_lat, dtype=np.float64)
        if self.is_identity:
            return pts[..., :2].copy()
        lam = np.radians(pts[..., 0])
        phi = np.radians(pts[..., 1])
        cos_phi = np.cos(phi)
        vecs = np.stack(
            (cos_phi * np.cos(lam), cos_phi * np.sin(lam), np.sin(phi)), axis=-1
        )
        rotated = vecs @ self.matrix().T
        x, y, z = rotated[..., 0], rotated[..., 1], rotated[..., 2]
        lon = np.degrees(np.arctan2(y, x))
        lat = np.degrees(np.arctan2(z, np.sqrt(x * x + y * y)))
        return np.stack((lon, lat), axis=-1)


def angular_distance(a: LonLat, b: LonLat) -> float:
    """Great-circle angle between ``a`` and ``b`` in radians."""
    return math.acos(clamp(dot(to_vector(a), to_vector(b)), -1.0, 1.0))


def build_rotation(from_: LonLat, to: LonLat) -> SphericalRotation:
    """Build the rotation that carries ``from_`` onto ``to``.

    Points closer than ``1e-6`` rad give the identity. When the cross product
    of the two unit vectors is too short to define an axis (the antipodal
    case) the axis becomes ``from x (1, 0, 0)``, or ``from x (0, 1, 0)`` if
    ``from`` already lies within ``|x| >= 0.9`` of the x axis.
    """
    from_vec = to_vector(from_)
    to_vec = to_vector(to)
    angle = math.acos(clamp(dot(from_vec, to_vec), -1.0, 1.0))
    if angle < EPSILON:
        return SphericalRotation.identity()

    axis = cross(from_vec, to_vec)
    if norm(axis) < EPSILON:
        fallback = _FALLBACK_X if abs(from_vec[0]) < 0.9 else _FALLBACK_Y
        logger.debug(
            "Degenerate rotation axis for %s -> %s, using fallback %s",
            from_,
            to,
            fallback,
        )
        axis = cross(from_vec, fallback)

    return SphericalRotation.about(normalize(axis), angle)


__all__ = ["SphericalRotation", "angular_distance", "build_rotation"]
