"""
Flat heightmap buffer with one extra row and column.

The generator works on a ``(width + 1) x (height + 1)`` grid so that per-cell
quads can be drawn without a missing edge. Heights are kept in a single
contiguous float64 buffer indexed ``x * (height + 1) + y``.
"""

from typing import Optional, Tuple

import numpy as np

from .errors import InvalidConfigurationError


class Heightmap:
    """Extended-grid heightmap owned by a single generation pass."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidConfigurationError(
                f"Heightmap dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.extended_width = width + 1
        self.extended_height = height + 1
        self.heights = np.zeros(self.extended_width * self.extended_height, dtype=np.float64)
        # Wall time of the pass that filled this buffer, if any
        self.generation_seconds: Optional[float] = None
        self._coordinates = None

    @property
    def shape(self) -> Tuple[int, int]:
        """Shape of the extended grid."""
        return (self.extended_width, self.extended_height)

    def index(self, x: int, y: int) -> int:
        """Flat buffer index of extended-grid cell ``(x, y)``."""
        return x * self.extended_height + y

    def grid(self) -> np.ndarray:
        """2D ``[x, y]`` view over the extended grid (shares memory)."""
        return self.heights.reshape(self.shape)

    def interior(self) -> np.ndarray:
        """2D view of the ``width x height`` sub-grid without the border."""
        return self.grid()[: self.width, : self.height]

    def coordinates(self) -> Tuple[np.ndarray, np.ndarray]:
        """x and y coordinates of every buffer entry, in buffer order."""
        if self._coordinates is not None:
            return self._coordinates
        xs = np.repeat(np.arange(self.extended_width, dtype=np.float64), self.extended_height)
        ys = np.tile(np.arange(self.extended_height, dtype=np.float64), self.extended_width)
        self._coordinates = (xs, ys)
        return self._coordinates

    def __getitem__(self, cell: Tuple[int, int]) -> float:
        x, y = cell
        if not (0 <= x < self.extended_width and 0 <= y < self.extended_height):
            raise IndexError(f"Cell ({x}, {y}) outside {self.extended_width}x{self.extended_height} grid")
        return float(self.heights[self.index(x, y)])

    def __repr__(self) -> str:
        return f"Heightmap(width={self.width}, height={self.height})"
