"""Country ids, colours and the default comparison set."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple, Union

from .models import CountryMeta

# ISO 3166-1 numeric ids shown in the comparison set by default.
COUNTRY_ORDER: Tuple[int, ...] = (304, 643, 124, 840, 76, 356, 180, 36, 392)

COUNTRY_META: Dict[int, CountryMeta] = {
    304: CountryMeta("Greenland", 2166086),
    643: CountryMeta("Russia", 17098246),
    124: CountryMeta("Canada", 9984670),
    840: CountryMeta("United States", 9833520),
    76: CountryMeta("Brazil", 8515767),
    356: CountryMeta("India", 3287263),
    180: CountryMeta("DR Congo", 2344858),
    36: CountryMeta("Australia", 7692024),
    392: CountryMeta("Japan", 377975),
}

COLOR_PALETTE: Tuple[str, ...] = (
    "#ef6f5a",
    "#f6c453",
    "#6ad0c4",
    "#9bd0ff",
    "#f49cbb",
    "#b5e48c",
    "#ffb870",
    "#86b6ff",
    "#f08a5d",
    "#7ed7c1",
    "#ffd166",
    "#06d6a0",
    "#118ab2",
    "#ef476f",
    "#ffd6a5",
    "#7f5af0",
    "#72efdd",
    "#e07a5f",
    "#f2cc8f",
    "#84a59d",
    "#f28482",
    "#a3cef1",
    "#ffcad4",
    "#cdb4db",
)

FALLBACK_SET_SIZE = 6


def normalize_id(value: Union[str, int]) -> str:
    """Strip leading zeros so ``"076"`` and ``76`` name the same country."""
    stripped = str(value).lstrip("0")
    return stripped or "0"


def country_color(country_id: str) -> str:
    try:
        index = abs(int(country_id)) % len(COLOR_PALETTE)
    except ValueError:
        index = sum(ord(char) for char in country_id) % len(COLOR_PALETTE)
    return COLOR_PALETTE[index]


def country_meta(country_id: Union[str, int]) -> Optional[CountryMeta]:
    try:
        return COUNTRY_META.get(int(normalize_id(country_id)))
    except ValueError:
        return None


def default_comparison_ids(available_ids: Iterable[str]) -> List[str]:
    """Ids from :data:`COUNTRY_ORDER` that are available, in that order.

    Falls back to the first few available ids when none of them are.
    """
    available = list(available_ids)
    present = set(available)
    ids = [str(numeric) for numeric in COUNTRY_ORDER if str(numeric) in present]
    return ids or available[:FALLBACK_SET_SIZE]


__all__ = [
    "COUNTRY_ORDER",
    "COUNTRY_META",
    "COLOR_PALETTE",
    "normalize_id",
    "country_color",
    "country_meta",
    "default_comparison_ids",
]
