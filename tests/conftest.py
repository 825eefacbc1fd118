"""Shared pytest fixtures for palette_templater tests."""

from __future__ import annotations

import pytest
from PIL import Image

from palette_templater import Color, ColorScheme, WallpaperImage

# ============================================================================
# Candidate pools
# ============================================================================


@pytest.fixture
def dominant_colors() -> list[Color]:
    """A wallpaper-like pool: one prevalent dark tone plus a spread of saturated accents.

    Twelve well separated candidates leave every contrasting pick a color
    that has not been committed yet.
    """
    return [
        Color(20, 30, 60, proportion=0.30),
        Color(200, 180, 150, proportion=0.08),
        Color(180, 50, 50, proportion=0.07),
        Color(60, 160, 80, proportion=0.07),
        Color(90, 120, 200, proportion=0.07),
        Color(210, 150, 40, proportion=0.06),
        Color(150, 60, 170, proportion=0.06),
        Color(40, 150, 160, proportion=0.06),
        Color(200, 90, 140, proportion=0.06),
        Color(120, 170, 40, proportion=0.06),
        Color(100, 60, 30, proportion=0.06),
        Color(60, 80, 130, proportion=0.05),
    ]


@pytest.fixture
def dark_image(dominant_colors) -> WallpaperImage:
    return WallpaperImage(dominant_colors, light=False)


@pytest.fixture
def light_image(dominant_colors) -> WallpaperImage:
    return WallpaperImage(dominant_colors, light=True)


# ============================================================================
# Schemes
# ============================================================================


@pytest.fixture
def dark_scheme(dark_image) -> ColorScheme:
    scheme = ColorScheme()
    scheme.generate(dark_image)
    return scheme


@pytest.fixture
def light_scheme(light_image) -> ColorScheme:
    scheme = ColorScheme()
    scheme.generate(light_image)
    return scheme


@pytest.fixture
def fixed_scheme() -> ColorScheme:
    """A hand-filled dark scheme with known hex values."""
    scheme = ColorScheme()
    scheme.background = Color.from_hex("#102030")
    scheme.text = Color.from_hex("#e0e0d0")
    scheme.accent = Color.from_hex("#88aaff")
    scheme.good = Color.from_hex("#44cc44")
    scheme.warning = Color.from_hex("#ee9933")
    scheme.error = Color.from_hex("#ee3333")
    scheme.info = Color.from_hex("#3366ee")
    scheme.scheme_colors = [Color(i * 16, i * 8, 255 - i * 16) for i in range(16)]
    return scheme


# ============================================================================
# Files
# ============================================================================


@pytest.fixture
def quadrant_image_path(tmp_path):
    """A 32x32 PNG split into four flat colored quadrants."""
    img = Image.new("RGB", (32, 32))
    quadrants = [
        ((0, 0, 16, 16), (200, 40, 40)),
        ((16, 0, 32, 16), (40, 160, 60)),
        ((0, 16, 16, 32), (50, 70, 200)),
        ((16, 16, 32, 32), (220, 200, 120)),
    ]
    for box, rgb in quadrants:
        img.paste(rgb, box)
    path = tmp_path / "wallpaper.png"
    img.save(path)
    return path
