"""
Height to color classification.

Terrain is painted with one of three two-color palettes; a point below the
mean height gets the palette's low color, anything else its high color.
"""

from enum import IntEnum
from typing import NamedTuple, Tuple

from ..config.palettes import PALETTES, get_palette


class Palette(IntEnum):
    """Palette selectors."""

    WATER_GRASS = 1
    LAVA_ASH = 2
    ICE_SNOW = 3


class Color(NamedTuple):
    """RGBA color with float channels in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def to_rgba32(self) -> Tuple[int, int, int, int]:
        """8-bit channels, each clamped to [0, 1] and rounded."""
        return tuple(int(round(min(max(c, 0.0), 1.0) * 255)) for c in self)

    def to_hex(self) -> str:
        """``#rrggbb`` string, alpha dropped."""
        r, g, b, _ = self.to_rgba32()
        return f"#{r:02x}{g:02x}{b:02x}"


def _pair(selector: int) -> Tuple[Color, Color]:
    _, low, high = PALETTES[selector]
    return Color(*low), Color(*high)


WATER, GRASS = _pair(Palette.WATER_GRASS)
LAVA, ASH = _pair(Palette.LAVA_ASH)
ICE, SNOW = _pair(Palette.ICE_SNOW)


def classify(point_height: float, mean_height: float, palette: int) -> Color:
    """
    Assign a color to a point based on its height.

    Args:
        point_height: Height of the terrain at the point
        mean_height: Threshold between the low and high color
        palette: Palette selector; values other than 1 and 2 use ice/snow

    Returns:
        The palette's low color if ``point_height < mean_height``, else its high color
    """
    below = point_height < mean_height

    if palette == Palette.WATER_GRASS:
        return WATER if below else GRASS
    elif palette == Palette.LAVA_ASH:
        return LAVA if below else ASH
    else:
        return ICE if below else SNOW


def palette_name(palette: int) -> str:
    """Readable name of a palette selector."""
    return get_palette(int(palette))[0]
