"""Tests for the Color value type."""

from __future__ import annotations

import pytest

from palette_templater.color import MIN_CONTRAST, Color, hex_to_rgb

BLACK = Color()
WHITE = Color(255, 255, 255)


def test_default_color_is_opaque_black():
    assert Color().rgb == (0, 0, 0)
    assert Color().alpha == 1.0
    assert Color().to_hex() == "#000000"


def test_channels_are_clamped():
    assert Color(300, -5, 128).rgb == (255, 0, 128)


def test_from_hex_round_trip():
    assert Color.from_hex("#1a2b3c").to_hex() == "#1a2b3c"


def test_hex_to_rgb_rejects_short_strings():
    with pytest.raises(ValueError):
        hex_to_rgb("#abc")


def test_equality_ignores_proportion_and_format():
    assert Color(1, 2, 3, proportion=0.9) == Color(1, 2, 3).with_format("rgb")


def test_contrast_black_white():
    assert WHITE.calculate_contrast(BLACK) == pytest.approx(21.0)
    assert BLACK.calculate_contrast(WHITE) == pytest.approx(21.0)


def test_luminance_difference():
    assert WHITE.calculate_luminance_difference(0.0) == pytest.approx(1.0)
    assert BLACK.calculate_luminance_difference(1.0) == pytest.approx(1.0)


def test_minimum_distance_empty_set_is_maximal():
    assert Color(10, 20, 30).calculate_minimum_distance([]) == 1.0


def test_minimum_distance_picks_nearest():
    color = Color(10, 10, 10)
    assert color.calculate_minimum_distance([WHITE, Color(10, 10, 10)]) == 0.0
    assert BLACK.calculate_minimum_distance([WHITE]) == pytest.approx(1.0)


def test_adjust_luminance_shifts_lightness():
    base = Color.from_hsl(200, 50, 40)
    assert base.adjust_luminance(10).hsl[2] == pytest.approx(50, abs=0.5)
    assert base.adjust_luminance(-10).hsl[2] == pytest.approx(30, abs=0.5)


def test_adjust_luminance_clamps():
    assert Color.from_hsl(0, 50, 95).adjust_luminance(20) == WHITE


def test_adjustments_return_new_colors():
    base = Color(100, 100, 100)
    base.adjust_luminance(20)
    base.adjust_alpha(0.5)
    assert base == Color(100, 100, 100)


def test_adjust_minmax_luminance():
    mid = Color.from_hsl(120, 40, 50)
    assert mid.adjust_minmax_luminance(80, True).hsl[2] == pytest.approx(80, abs=0.5)
    assert mid.adjust_minmax_luminance(10, False).hsl[2] == pytest.approx(10, abs=0.5)
    # Already past the bound: unchanged
    assert mid.adjust_minmax_luminance(30, True) == mid
    assert mid.adjust_minmax_luminance(70, False) == mid


def test_adjust_hue_sets_hue():
    red = Color.from_hsl(0, 60, 50)
    assert red.adjust_hue(240).hsl[0] == pytest.approx(240, abs=1)


def test_adjust_min_contrast_reaches_ratio():
    background = Color.from_hex("#101820")
    dim = Color.from_hsl(30, 50, 15)
    adjusted = dim.adjust_min_contrast(3.0, background, True)
    assert adjusted.calculate_contrast(background) >= 3.0
    assert adjusted.hsl[2] > dim.hsl[2]


def test_adjust_contrast_color_darkens_on_light_background():
    background = Color.from_hex("#f0f0e8")
    adjusted = Color.from_hsl(200, 60, 70).adjust_contrast_color(background, False)
    assert adjusted.calculate_contrast(background) >= MIN_CONTRAST


def test_multiply_scales_channels():
    assert Color(200, 100, 40).multiply(0.75).rgb == (150, 75, 30)


def test_alpha_is_clamped():
    assert Color().adjust_alpha(1.5).alpha == 1.0
    assert Color().adjust_alpha(-1).alpha == 0.0


@pytest.mark.parametrize(
    "token,expected",
    [
        ("hex", "#ff8000"),
        ("hexa", "#ff800080"),
        ("strip", "ff8000"),
        ("rgb", "rgb(255, 128, 0)"),
        ("rgba", "rgba(255, 128, 0, 0.5)"),
    ],
)
def test_formats(token, expected):
    color = Color(255, 128, 0, alpha=0.5).with_format(token)
    assert color.to_string() == expected
    assert str(color) == expected
    assert color.to_hex() == "#ff8000"


def test_invalid_format():
    assert not Color.is_valid_format("cmyk")
    with pytest.raises(ValueError):
        Color().with_format("cmyk")
