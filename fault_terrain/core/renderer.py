"""
Turns a heightmap into a flat color buffer.
"""

import random
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np
import structlog

from .colors import Color, Palette, classify
from .heightmap import Heightmap
from .random_source import RandomSource
from .statistics import average_height

logger = structlog.get_logger()

ColorSink = Callable[[List[Color]], None]


@dataclass
class RenderResult:
    """Color buffer plus the values it was painted with."""

    colors: List[Color]
    palette: int
    mean_height: float
    width: int
    height: int

    def to_rgba32(self) -> np.ndarray:
        """``(width * height, 4)`` uint8 array in buffer order."""
        if not self.colors:
            return np.zeros((0, 4), dtype=np.uint8)
        return np.array([c.to_rgba32() for c in self.colors], dtype=np.uint8)

    def to_hex(self) -> List[str]:
        return [c.to_hex() for c in self.colors]


def select_palette(random_source: RandomSource) -> int:
    """Pick a palette selector uniformly from 1, 2 and 3."""
    count = len(Palette)
    return 1 + min(int(random_source.random() * count), count - 1)


class GridRenderer:
    """
    Paints the visible part of a heightmap.

    A new palette is drawn on every render, so re-rendering an unchanged
    heightmap can change its look.
    """

    def __init__(self, random_source: Optional[RandomSource] = None, sink: Optional[ColorSink] = None):
        self.random_source = random_source if random_source is not None else random.Random()
        self.sink = sink

    def render(self, heightmap: Heightmap, palette: Optional[int] = None) -> RenderResult:
        """
        Build the color buffer for ``heightmap``.

        Args:
            heightmap: Heightmap to paint
            palette: Palette selector to use instead of a random one

        Returns:
            RenderResult whose colors are ordered ``x * height + y``
        """
        if palette is None:
            palette = select_palette(self.random_source)

        width, height = heightmap.width, heightmap.height
        grid = heightmap.grid()
        mean = average_height(grid, width, height)

        colors: List[Color] = []
        for x in range(width):
            for y in range(height):
                colors.append(classify(grid[x, y], mean, palette))

        logger.debug("Heightmap rendered", width=width, height=height, palette=palette, mean_height=mean)

        if self.sink is not None:
            self.sink(colors)

        return RenderResult(colors=colors, palette=palette, mean_height=mean, width=width, height=height)
