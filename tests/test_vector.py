import math

import pytest

from true_size.utils import clamp, cross, dot, normalize, to_lon_lat, to_vector


@pytest.mark.parametrize(
    ("lon_lat", "expected"),
    (
        ((0.0, 0.0), (1.0, 0.0, 0.0)),
        ((90.0, 0.0), (0.0, 1.0, 0.0)),
        ((0.0, 90.0), (0.0, 0.0, 1.0)),
        ((180.0, 0.0), (-1.0, 0.0, 0.0)),
    ),
)
def test_to_vector_cardinal_points(lon_lat, expected) -> None:
    assert to_vector(lon_lat) == pytest.approx(expected, abs=1e-12)


def test_to_vector_is_unit_length() -> None:
    x, y, z = to_vector((-73.5, 41.25))
    assert math.isclose(x * x + y * y + z * z, 1.0, rel_tol=1e-12)


def test_to_lon_lat_inverts_to_vector() -> None:
    lon, lat = to_lon_lat(to_vector((-122.4, 37.8)))
    assert lon == pytest.approx(-122.4, abs=1e-9)
    assert lat == pytest.approx(37.8, abs=1e-9)


def test_to_lon_lat_ignores_vector_length() -> None:
    assert to_lon_lat((0.0, 3.0, 3.0)) == pytest.approx((90.0, 45.0))


def test_cross_and_dot() -> None:
    x = (1.0, 0.0, 0.0)
    y = (0.0, 1.0, 0.0)
    assert cross(x, y) == (0.0, 0.0, 1.0)
    assert cross(y, x) == (0.0, 0.0, -1.0)
    assert dot(x, y) == 0.0
    assert dot((1.0, 2.0, 3.0), (4.0, -5.0, 6.0)) == 12.0


def test_normalize() -> None:
    assert normalize((3.0, 0.0, 4.0)) == pytest.approx((0.6, 0.0, 0.8))


def test_normalize_short_vector_gives_zero() -> None:
    assert normalize((1e-7, 0.0, 0.0)) == (0.0, 0.0, 0.0)


def test_clamp() -> None:
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert clamp(0.25, 0.0, 1.0) == 0.25
    assert math.isnan(clamp(math.nan, -1.0, 1.0))
