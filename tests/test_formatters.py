import pytest

from true_size.formatters import (
    format_latitude,
    format_longitude,
    format_planet_ratio,
    format_scale,
)


@pytest.mark.parametrize(
    ("lat", "expected"),
    ((51.5, "51.5degN"), (-33.86, "33.9degS"), (0.04, "0.0deg"), (-0.01, "0.0deg")),
)
def test_format_latitude(lat: float, expected: str) -> None:
    assert format_latitude(lat) == expected


@pytest.mark.parametrize(
    ("lon", "expected"),
    ((151.2, "151.2degE"), (-74.0, "74.0degW"), (0.0, "0.0deg"), (180.0, "180.0degE")),
)
def test_format_longitude(lon: float, expected: str) -> None:
    assert format_longitude(lon) == expected


@pytest.mark.parametrize(
    ("scale", "expected"),
    ((2.0, "200%"), (0.5, "50%"), (1.0, "100%"), (0.125, "13%"), (3.3333, "333%")),
)
def test_format_scale(scale: float, expected: str) -> None:
    assert format_scale(scale) == expected


@pytest.mark.parametrize(
    ("ratio", "expected"),
    ((142984 / 12742, "11.2x Earth"), (1.0, "1.0x Earth"), (6779 / 12742, "0.53x Earth")),
)
def test_format_planet_ratio(ratio: float, expected: str) -> None:
    assert format_planet_ratio(ratio) == expected
