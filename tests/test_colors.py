"""
Tests for height to color classification.
"""

import pytest

from fault_terrain.core.colors import (
    ASH, GRASS, ICE, LAVA, SNOW, WATER, Color, Palette, classify, palette_name,
)


class TestClassify:
    """Test palette branches."""

    @pytest.mark.parametrize("palette,low,high", [
        (Palette.WATER_GRASS, WATER, GRASS),
        (Palette.LAVA_ASH, LAVA, ASH),
        (Palette.ICE_SNOW, ICE, SNOW),
    ])
    def test_palette_branches(self, palette, low, high):
        """Test low and high colors of each palette."""
        assert classify(0.4, 0.5, palette) == low
        assert classify(0.6, 0.5, palette) == high

    @pytest.mark.parametrize("palette", [1, 2, 3, 0, 4, -1])
    def test_height_equal_to_mean_is_high(self, palette):
        """Test a height equal to the mean takes the high color."""
        low = classify(-1.0, 0.0, palette)
        at_mean = classify(0.0, 0.0, palette)

        assert at_mean != low
        assert at_mean == classify(1.0, 0.0, palette)

    @pytest.mark.parametrize("palette", [0, 4, 99, -1])
    def test_unknown_palette_falls_through_to_ice_snow(self, palette):
        """Test unknown palette selectors use ice/snow."""
        assert classify(0.0, 1.0, palette) == ICE
        assert classify(2.0, 1.0, palette) == SNOW

    def test_palette_colors(self):
        """Test the palette color values."""
        assert WATER == Color(0.0, 0.0, 1.0)
        assert GRASS == Color(0.0, 1.0, 0.0)
        assert LAVA == Color(0.647, 0.165, 0.165)
        assert ASH == Color(0.2, 0.3, 0.4)
        assert ICE == Color(0.5, 0.5, 0.5)
        assert SNOW == Color(1.0, 1.0, 1.0)

    def test_palette_names(self):
        """Test readable palette names."""
        assert palette_name(1) == "water_grass"
        assert palette_name(Palette.LAVA_ASH) == "lava_ash"
        assert palette_name(3) == "ice_snow"
        assert palette_name(7) == "ice_snow"


class TestColorConversion:
    """Test 8-bit and hex conversion."""

    def test_rgba32(self):
        """Test conversion to 8-bit channels."""
        assert WATER.to_rgba32() == (0, 0, 255, 255)
        assert LAVA.to_rgba32() == (165, 42, 42, 255)

    def test_rgba32_clamps(self):
        """Test out-of-range channels are clamped."""
        assert Color(1.5, -0.2, 0.0, 1.0).to_rgba32() == (255, 0, 0, 255)

    def test_hex(self):
        """Test conversion to hex strings."""
        assert WATER.to_hex() == "#0000ff"
        assert GRASS.to_hex() == "#00ff00"
        assert SNOW.to_hex() == "#ffffff"
