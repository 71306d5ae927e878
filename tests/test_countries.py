import pytest

from true_size.countries import (
    COLOR_PALETTE,
    COUNTRY_META,
    COUNTRY_ORDER,
    country_color,
    country_meta,
    default_comparison_ids,
    normalize_id,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    (("076", "76"), (76, "76"), ("840", "840"), ("000", "0"), (0, "0"), ("", "0")),
)
def test_normalize_id(raw, expected) -> None:
    assert normalize_id(raw) == expected


def test_numeric_ids_index_the_palette() -> None:
    assert country_color("840") == COLOR_PALETTE[840 % len(COLOR_PALETTE)]
    assert country_color("76") == "#f49cbb"
    assert country_color("-1") == COLOR_PALETTE[1]


def test_text_ids_use_character_sum() -> None:
    assert country_color("abc") == COLOR_PALETTE[(97 + 98 + 99) % len(COLOR_PALETTE)]


def test_country_meta_lookup() -> None:
    assert country_meta("076").name == "Brazil"
    assert country_meta(304).area_km2 == 2166086
    assert country_meta("999") is None
    assert country_meta("XK") is None


def test_comparison_set_covers_meta() -> None:
    assert set(COUNTRY_ORDER) == set(COUNTRY_META)


def test_default_comparison_ids_keeps_configured_order() -> None:
    assert default_comparison_ids(["76", "4", "840", "392"]) == ["840", "76", "392"]


def test_default_comparison_ids_falls_back_to_first_six() -> None:
    available = [str(i) for i in range(1, 10)]
    assert default_comparison_ids(available) == available[:6]
    assert default_comparison_ids([]) == []
