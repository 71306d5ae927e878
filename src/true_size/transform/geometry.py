"""Structure-preserving transforms over GeoJSON geometry mappings.

Every function here returns fresh containers and never mutates its input.
Only the leaf ``(lon, lat)`` values change; extra position dimensions such
as altitude ride along untouched.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence

import numpy as np

from ..utils import EPSILON, MAX_LATITUDE, LonLat, clamp

Geometry = Mapping[str, Any]
Position = Sequence[float]
PositionTransform = Callable[[Position], List[float]]
RotationFunction = Callable[[LonLat], LonLat]

# Nesting depth of positions inside ``coordinates`` for each geometry kind.
POSITION_DEPTH: Dict[str, int] = {
    "Point": 0,
    "MultiPoint": 1,
    "LineString": 1,
    "MultiLineString": 2,
    "Polygon": 2,
    "MultiPolygon": 3,
}


def _map_positions(coords: Any, depth: int, transform: PositionTransform) -> Any:
    if depth == 0:
        return transform(coords)
    return [_map_positions(item, depth - 1, transform) for item in coords]


def map_geometry(geometry: Geometry, transform: PositionTransform) -> Geometry:
    """Apply ``transform`` to every position of ``geometry``.

    Unknown geometry kinds are returned as-is.
    """
    kind = geometry.get("type")
    if kind == "GeometryCollection":
        return {
            **geometry,
            "geometries": [
                map_geometry(child, transform) for child in geometry["geometries"]
            ],
        }
    depth = POSITION_DEPTH.get(kind)  # type: ignore[arg-type]
    if depth is None:
        return geometry
    return {
        **geometry,
        "coordinates": _map_positions(geometry["coordinates"], depth, transform),
    }


def iter_positions(geometry: Geometry) -> Iterator[Position]:
    """Yield every position of ``geometry`` in document order."""
    kind = geometry.get("type")
    if kind == "GeometryCollection":
        for child in geometry["geometries"]:
            yield from iter_positions(child)
        return
    depth = POSITION_DEPTH.get(kind)  # type: ignore[arg-type]
    if depth is None:
        return
    stack = [(geometry["coordinates"], depth)]
    while stack:
        coords, level = stack.pop()
        if level == 0:
            yield coords
        else:
            stack.extend((item, level - 1) for item in reversed(coords))


def rotate_geometry(geometry: Geometry, rotate: RotationFunction) -> Geometry:
    """Run ``rotate`` over the lon/lat of every position in ``geometry``."""

    def rotate_position(coord: Position) -> List[float]:
        lon, lat = rotate((coord[0], coord[1]))
        return [lon, lat, *coord[2:]]

    return map_geometry(geometry, rotate_position)


def scale_geometry(geometry: Geometry, center: LonLat, factor: float) -> Geometry:
    """Scale every position's offset from ``center`` by ``factor``.

    Longitude is clamped to [-180, 180] and latitude to
    [-MAX_LATITUDE, MAX_LATITUDE] so the result stays projectable.
    """
    center_lon, center_lat = center[0], center[1]

    def scale_position(coord: Position) -> List[float]:
        lon = clamp(center_lon + (coord[0] - center_lon) * factor, -180.0, 180.0)
        lat = clamp(
            center_lat + (coord[1] - center_lat) * factor, -MAX_LATITUDE, MAX_LATITUDE
        )
        return [lon, lat, *coord[2:]]

    return map_geometry(geometry, scale_position)


def transform_feature(
    feature: Mapping[str, Any], transform: Callable[[Geometry], Geometry]
) -> Dict[str, Any]:
    """Return a copy of ``feature`` whose geometry went through ``transform``."""
    geometry = feature.get("geometry")
    if geometry is None:
        return dict(feature)
    return {**feature, "geometry": transform(geometry)}


def vertex_centroid(geometry: Geometry) -> Optional[LonLat]:
    """Approximate a geometry's centroid from the mean of its vertex vectors.

    Closing vertices of rings count twice. Returns ``None`` when there are no
    vertices or the mean vector collapses to the origin.
    """
    pts = np.array([(p[0], p[1]) for p in iter_positions(geometry)], dtype=np.float64)
    if pts.size == 0:
        return None
    lam = np.radians(pts[:, 0])
    phi = np.radians(pts[:, 1])
    cos_phi = np.cos(phi)
    mean = np.array(
        [
            np.mean(cos_phi * np.cos(lam)),
            np.mean(cos_phi * np.sin(lam)),
            np.mean(np.sin(phi)),
        ]
    )
    if float(np.linalg.norm(mean)) < EPSILON:
        return None
    lon = float(np.degrees(np.arctan2(mean[1], mean[0])))
    lat = float(np.degrees(np.arctan2(mean[2], np.hypot(mean[0], mean[1]))))
    return (lon, lat)


__all__ = [
    "Geometry",
    "POSITION_DEPTH",
    "Position",
    "RotationFunction",
    "iter_positions",
    "map_geometry",
    "rotate_geometry",
    "scale_geometry",
    "transform_feature",
    "vertex_centroid",
]
