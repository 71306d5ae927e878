"""Planet reference data and the "country on another planet" placement."""

from __future__ import annotations

from typing import Dict, Tuple

from .models import Planet
from .transform.geometry import Geometry, rotate_geometry, scale_geometry
from .transform.rotation import build_rotation
from .utils import LonLat

EARTH_DIAMETER_KM = 12742.0

PLANETS: Tuple[Planet, ...] = (
    Planet("jupiter", "Jupiter", 142984.0, "2k_jupiter.jpg"),
    Planet("saturn", "Saturn", 120536.0, "2k_saturn.jpg"),
    Planet("uranus", "Uranus", 51118.0, "2k_uranus.jpg"),
    Planet("neptune", "Neptune", 49528.0, "2k_neptune.jpg"),
    Planet("earth", "Earth", 12742.0, "2k_earth_daymap.jpg"),
    Planet("moon", "Moon", 3474.8, "2k_moon.jpg"),
    Planet("venus", "Venus", 12104.0, "2k_venus_atmosphere.jpg"),
    Planet("mars", "Mars", 6779.0, "2k_mars.jpg"),
    Planet("mercury", "Mercury", 4879.0, "2k_mercury.jpg"),
)

_PLANETS_BY_ID: Dict[str, Planet] = {planet.id: planet for planet in PLANETS}


def get_planet(planet_id: str) -> Planet:
    """Look up a planet by id; raises ``KeyError`` for unknown ids."""
    return _PLANETS_BY_ID[planet_id]


def planet_ratio(planet: Planet) -> float:
    """Diameter of ``planet`` relative to Earth's."""
    return planet.diameter_km / EARTH_DIAMETER_KM


def planet_scale_factor(planet: Planet) -> float:
    """Angular scale a country gets when moved from Earth onto ``planet``."""
    return EARTH_DIAMETER_KM / planet.diameter_km


def place_on_planet(
    geometry: Geometry, original_centroid: LonLat, target: LonLat, planet: Planet
) -> Geometry:
    """Resize ``geometry`` for ``planet`` and move its centroid to ``target``.

    Scaling has to happen first, around the untouched centroid: once the shape
    is rotated its original centroid no longer sits under the vertices.
    """
    scaled = scale_geometry(geometry, original_centroid, planet_scale_factor(planet))
    return rotate_geometry(scaled, build_rotation(original_centroid, target))


__all__ = [
    "EARTH_DIAMETER_KM",
    "PLANETS",
    "get_planet",
    "planet_ratio",
    "planet_scale_factor",
    "place_on_planet",
]
