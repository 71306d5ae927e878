"""Command line front end: run the transforms over GeoJSON files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from . import __version__
from .formatters import (
    format_latitude,
    format_longitude,
    format_planet_ratio,
    format_scale,
)
from .countries import country_color, country_meta, default_comparison_ids, normalize_id
from .models import AppConfig
from .solar import PLANETS, get_planet, place_on_planet, planet_ratio
from .transform import (
    Geometry,
    build_rotation,
    map_geometry,
    rotate_geometry,
    scale_geometry,
    selection_details,
    transform_feature,
    vertex_centroid,
)
from .transform.geometry import POSITION_DEPTH

logger = logging.getLogger(__name__)

GeometryTransform = Callable[[Geometry], Geometry]

GEOMETRY_TYPES = frozenset(POSITION_DEPTH) | {"GeometryCollection"}

EXIT_OK = 0
EXIT_INPUT_ERROR = 2


# ---------------------------- Config I/O ----------------------------------


def default_config_path() -> Path:
    return Path.home() / ".true_size_config.json"


def load_config(path: Optional[Path] = None) -> AppConfig:
    p = path or default_config_path()
    if p.exists():
        try:
            return AppConfig.from_json(p.read_text(encoding="utf-8"))
        except (OSError, ValueError, TypeError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", p, exc)
    return AppConfig()


# ---------------------------- GeoJSON I/O ---------------------------------


def read_document(source: str) -> Dict[str, Any]:
    """Load a GeoJSON object from ``source`` (a path, or ``-`` for stdin)."""
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    doc = json.loads(text)
    if not isinstance(doc, dict):
        raise ValueError("Expected a GeoJSON object at the top level.")
    kind = doc.get("type")
    if kind not in GEOMETRY_TYPES and kind not in ("Feature", "FeatureCollection"):
        raise ValueError(f"Unsupported GeoJSON type: {kind!r}")
    if kind == "FeatureCollection":
        features = doc.get("features", [])
        if not isinstance(features, list):
            raise ValueError("FeatureCollection \"features\" must be a list.")
        for index, feature in enumerate(features):
            if not isinstance(feature, dict):
                raise ValueError(f"Feature {index} is not a GeoJSON object.")
    return doc


def write_document(doc: Dict[str, Any], target: Optional[str], cfg: AppConfig) -> None:
    text = json.dumps(doc, indent=cfg.json_indent or None)
    if target is None or target == "-":
        sys.stdout.write(text + "\n")
    else:
        Path(target).write_text(text + "\n", encoding="utf-8")


def round_geometry(geometry: Geometry, digits: int) -> Geometry:
    return map_geometry(geometry, lambda coord: [round(v, digits) for v in coord])


def apply_to_document(
    doc: Dict[str, Any],
    make_transform: Callable[[Geometry], Optional[GeometryTransform]],
) -> Dict[str, Any]:
    """Transform every geometry in ``doc``.

    ``make_transform`` receives each geometry and returns the transform for
    it, or ``None`` to leave that geometry alone.
    """

    def apply(geometry: Geometry) -> Geometry:
        transform = make_transform(geometry)
        return geometry if transform is None else transform(geometry)

    kind = doc.get("type")
    if kind == "FeatureCollection":
        return {
            **doc,
            "features": [transform_feature(f, apply) for f in doc.get("features", [])],
        }
    if kind == "Feature":
        return transform_feature(doc, apply)
    return dict(apply(doc))


def feature_label(feature: Dict[str, Any], index: int) -> str:
    """Display name for a feature: known country, then ``properties.name``, then id."""
    raw_id = feature.get("id")
    meta = country_meta(raw_id) if raw_id is not None else None
    if meta is not None:
        return meta.name
    name = (feature.get("properties") or {}).get("name")
    if name:
        return str(name)
    return str(index) if raw_id is None else f"Country {normalize_id(raw_id)}"


def colorize(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Give every feature with an id a ``fill`` property from the country palette."""

    def paint(feature: Dict[str, Any]) -> Dict[str, Any]:
        raw_id = feature.get("id")
        if raw_id is None:
            return feature
        properties = dict(feature.get("properties") or {})
        properties["fill"] = country_color(normalize_id(raw_id))
        return {**feature, "properties": properties}

    if doc.get("type") == "FeatureCollection":
        return {**doc, "features": [paint(f) for f in doc.get("features", [])]}
    if doc.get("type") == "Feature":
        return paint(doc)
    return doc


def _finish(doc: Dict[str, Any], args: argparse.Namespace, cfg: AppConfig) -> Dict[str, Any]:
    if getattr(args, "colorize", False):
        doc = colorize(doc)
    if cfg.precision is None:
        return doc
    digits = cfg.precision
    return apply_to_document(doc, lambda _g: lambda g: round_geometry(g, digits))


# ------------------------------ Commands ----------------------------------


def _cmd_rotate(args: argparse.Namespace, cfg: AppConfig) -> int:
    rotation = build_rotation(tuple(args.from_), tuple(args.to))
    logger.debug("Rotation %s -> %s: %r", args.from_, args.to, rotation)
    doc = apply_to_document(
        read_document(args.input), lambda _g: lambda g: rotate_geometry(g, rotation)
    )
    write_document(_finish(doc, args, cfg), args.output, cfg)
    return EXIT_OK


def _cmd_scale(args: argparse.Namespace, cfg: AppConfig) -> int:
    center = tuple(args.center)
    doc = apply_to_document(
        read_document(args.input),
        lambda _g: lambda g: scale_geometry(g, center, args.factor),
    )
    write_document(_finish(doc, args, cfg), args.output, cfg)
    return EXIT_OK


def _cmd_planet(args: argparse.Namespace, cfg: AppConfig) -> int:
    planet_id = args.planet or cfg.default_planet
    try:
        planet = get_planet(planet_id)
    except KeyError:
        raise ValueError(f"unknown planet {planet_id!r}") from None
    target = tuple(args.to)

    def make_transform(geometry: Geometry) -> Optional[GeometryTransform]:
        centroid = tuple(args.from_) if args.from_ else vertex_centroid(geometry)
        if centroid is None:
            logger.debug(
                "No centroid for %s geometry, leaving it in place", geometry.get("type")
            )
            return None
        return lambda g: place_on_planet(g, centroid, target, planet)

    doc = apply_to_document(read_document(args.input), make_transform)
    write_document(_finish(doc, args, cfg), args.output, cfg)
    return EXIT_OK


def _cmd_mercator(args: argparse.Namespace, cfg: AppConfig) -> int:
    details = selection_details(args.original_lat, args.current_lat)
    print(f"original latitude: {format_latitude(details.original_lat)}")
    print(f"current latitude:  {format_latitude(details.current_lat)}")
    print(f"apparent size:     {format_scale(details.current_scale)}")
    return EXIT_OK


def _cmd_planets(args: argparse.Namespace, cfg: AppConfig) -> int:
    for planet in PLANETS:
        marker = "*" if planet.id == cfg.default_planet else " "
        print(
            f"{marker} {planet.id:<8} {planet.name:<8} "
            f"{planet.diameter_km:>9,.0f} km  {format_planet_ratio(planet_ratio(planet))}"
        )
    return EXIT_OK


def _cmd_where(args: argparse.Namespace, cfg: AppConfig) -> int:
    doc = read_document(args.input)
    features: List[Dict[str, Any]]
    if doc.get("type") == "FeatureCollection":
        features = list(doc.get("features", []))
    elif doc.get("type") == "Feature":
        features = [doc]
    else:
        features = [{"type": "Feature", "geometry": doc}]
    if args.comparison:
        by_id = {
            normalize_id(f["id"]): f for f in features if f.get("id") is not None
        }
        features = [by_id[i] for i in default_comparison_ids(by_id)]
    for index, feature in enumerate(features):
        geometry = feature.get("geometry")
        centroid = vertex_centroid(geometry) if geometry else None
        label = feature_label(feature, index)
        if centroid is None:
            print(f"{label}: no vertices")
        else:
            print(f"{label}: {format_longitude(centroid[0])} {format_latitude(centroid[1])}")
    return EXIT_OK


# ------------------------------- Parser -----------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="true-size",
        description="Move and resize GeoJSON shapes on the sphere.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--config", type=Path, default=None, help="config file path")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_io(p: argparse.ArgumentParser) -> None:
        p.add_argument("input", help="GeoJSON file, or - for stdin")
        p.add_argument("-o", "--output", default=None, help="output file (default stdout)")
        p.add_argument(
            "--colorize", action="store_true", help="set a palette fill on features with ids"
        )

    lonlat = dict(nargs=2, type=float, metavar=("LON", "LAT"))

    rotate = sub.add_parser("rotate", help="rotate shapes so FROM lands on TO")
    add_io(rotate)
    rotate.add_argument("--from", dest="from_", required=True, **lonlat)
    rotate.add_argument("--to", required=True, **lonlat)
    rotate.set_defaults(func=_cmd_rotate)

    scale = sub.add_parser("scale", help="scale shapes around a center point")
    add_io(scale)
    scale.add_argument("--center", required=True, **lonlat)
    scale.add_argument("--factor", required=True, type=float)
    scale.set_defaults(func=_cmd_scale)

    planet = sub.add_parser("planet", help="show shapes at true size on another planet")
    add_io(planet)
    planet.add_argument("--planet", default=None, help="planet id (default from config)")
    planet.add_argument("--from", dest="from_", default=None, **lonlat)
    planet.add_argument("--to", required=True, **lonlat)
    planet.set_defaults(func=_cmd_planet)

    mercator = sub.add_parser("mercator", help="Mercator size change between latitudes")
    mercator.add_argument("original_lat", type=float)
    mercator.add_argument("current_lat", type=float)
    mercator.set_defaults(func=_cmd_mercator)

    planets = sub.add_parser("planets", help="list planets")
    planets.set_defaults(func=_cmd_planets)

    where = sub.add_parser("where", help="print approximate centroids")
    where.add_argument("input", help="GeoJSON file, or - for stdin")
    where.add_argument(
        "--comparison", action="store_true", help="only the default comparison countries"
    )
    where.set_defaults(func=_cmd_where)

    return parser


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cfg = load_config(args.config)
    try:
        return args.func(args, cfg)
    except KeyError as exc:
        print(f"error: malformed GeoJSON, missing member {exc}", file=sys.stderr)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
    return EXIT_INPUT_ERROR


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
