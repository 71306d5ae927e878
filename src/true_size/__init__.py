"""true_size package: drag countries across the sphere at their true size."""

from __future__ import annotations

from ._version import get_version
from .transform import (
    SphericalRotation,
    build_rotation,
    mercator_scale,
    rotate_geometry,
    scale_geometry,
)

__version__ = get_version()


def main() -> None:
    """Entry point for ``python -m true_size`` and console scripts."""
    from .cli import main as _main

    _main()


__all__ = [
    "main",
    "__version__",
    "get_version",
    "SphericalRotation",
    "build_rotation",
    "mercator_scale",
    "rotate_geometry",
    "scale_geometry",
]
