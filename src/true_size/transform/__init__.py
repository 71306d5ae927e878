"""Spherical rotation, scaling and Mercator math for GeoJSON geometries."""

from .geometry import (
    Geometry,
    iter_positions,
    map_geometry,
    rotate_geometry,
    scale_geometry,
    transform_feature,
    vertex_centroid,
)
from .mercator import mercator_scale, selection_details
from .rotation import SphericalRotation, angular_distance, build_rotation

__all__ = [
    "Geometry",
    "SphericalRotation",
    "angular_distance",
    "build_rotation",
    "iter_positions",
    "map_geometry",
    "mercator_scale",
    "rotate_geometry",
    "scale_geometry",
    "selection_details",
    "transform_feature",
    "vertex_centroid",
]
