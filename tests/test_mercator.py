import math

import pytest

from true_size.models import SelectionDetails
from true_size.transform import mercator_scale, selection_details


def test_moving_to_sixty_doubles_apparent_size() -> None:
    assert mercator_scale(0.0, 60.0) == pytest.approx(2.0)


def test_moving_to_equator_halves_apparent_size() -> None:
    assert mercator_scale(60.0, 0.0) == pytest.approx(0.5)


def test_same_latitude_is_exactly_one() -> None:
    assert mercator_scale(45.0, 45.0) == 1.0


def test_scale_is_symmetric_in_hemisphere() -> None:
    assert mercator_scale(10.0, -50.0) == pytest.approx(mercator_scale(10.0, 50.0))


def test_scale_is_not_clamped_near_pole() -> None:
    assert mercator_scale(0.0, 89.9999) > 500_000
    assert math.isfinite(mercator_scale(0.0, 90.0))


def test_selection_details() -> None:
    details = selection_details(64.0, 20.0)
    assert isinstance(details, SelectionDetails)
    assert details.original_lat == 64.0
    assert details.current_lat == 20.0
    assert details.current_scale == pytest.approx(
        math.cos(math.radians(64.0)) / math.cos(math.radians(20.0))
    )
