"""Dataclasses describing configuration and reference data for true_size."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

import json


@dataclass(frozen=True)
class Planet:
    """A body a country can be dropped onto for a size comparison."""

    id: str
    name: str
    diameter_km: float
    texture: Optional[str] = None  # equirectangular texture file, if any


@dataclass(frozen=True)
class CountryMeta:
    """Display name and land area for a country in the comparison set."""

    name: str
    area_km2: float


@dataclass(frozen=True)
class SelectionDetails:
    """Mercator readout for the currently selected country."""

    original_lat: float
    current_lat: float
    current_scale: float


@dataclass
class AppConfig:
    """Persisted command-line preferences."""

    default_planet: str = "jupiter"
    json_indent: int = 2
    precision: Optional[int] = None  # round output coordinates when set

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @staticmethod
    def from_json(text: str) -> "AppConfig":
        data: Dict = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Config must be a JSON object.")
        precision = data.get("precision")
        return AppConfig(
            default_planet=str(data.get("default_planet", "jupiter")),
            json_indent=int(data.get("json_indent", 2)),
            precision=None if precision is None else int(precision),
        )


__all__ = [
    "Planet",
    "CountryMeta",
    "SelectionDetails",
    "AppConfig",
]
