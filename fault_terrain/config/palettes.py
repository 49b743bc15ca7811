"""
Two-color palettes used to paint terrain.

Each palette maps to a (below mean, at or above mean) pair of RGB values in
the 0-1 range.
"""

from typing import Dict, List, Tuple

RGB = Tuple[float, float, float]

BLUE: RGB = (0.0, 0.0, 1.0)
GREEN: RGB = (0.0, 1.0, 0.0)
LAVA: RGB = (0.647, 0.165, 0.165)
ASH: RGB = (0.2, 0.3, 0.4)
GRAY: RGB = (0.5, 0.5, 0.5)
WHITE: RGB = (1.0, 1.0, 1.0)

# palette selector -> (name, low color, high color)
PALETTES: Dict[int, Tuple[str, RGB, RGB]] = {
    1: ("water_grass", BLUE, GREEN),
    2: ("lava_ash", LAVA, ASH),
    3: ("ice_snow", GRAY, WHITE),
}

# Selector used for anything outside PALETTES
FALLBACK_PALETTE = 3


def get_palette(selector: int) -> Tuple[str, RGB, RGB]:
    """Get palette by selector, falling back to ice/snow."""
    return PALETTES.get(selector, PALETTES[FALLBACK_PALETTE])


def list_palettes() -> List[str]:
    """List all available palette names."""
    return [name for name, _, _ in PALETTES.values()]
