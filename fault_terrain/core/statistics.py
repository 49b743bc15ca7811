"""
Height statistics over the visible part of a heightmap.

The generator's extra border row and column are excluded everywhere here.
"""

from dataclasses import dataclass

import numpy as np

from .errors import InvalidConfigurationError
from .heightmap import Heightmap


@dataclass
class HeightStatistics:
    """Summary of the visible terrain heights."""

    mean: float
    minimum: float
    maximum: float


def average_height(grid, width: int, height: int) -> float:
    """
    Arithmetic mean of the ``width x height`` sub-grid.

    Args:
        grid: 2D ``[x][y]`` heights, at least ``width x height`` in size
        width: Number of visible columns
        height: Number of visible rows

    Returns:
        Mean height of the sub-grid
    """
    if width * height == 0:
        raise InvalidConfigurationError(
            f"Cannot average an empty {width}x{height} grid"
        )

    values = np.asarray(grid, dtype=np.float64)[:width, :height]
    # Summing offsets from the first cell keeps a uniform grid exact
    shift = values[0, 0]
    return float(shift + np.sum(values - shift) / (width * height))


def summarize(heightmap: Heightmap) -> HeightStatistics:
    """Mean, minimum and maximum of the visible heights."""
    interior = heightmap.interior()
    return HeightStatistics(
        mean=average_height(heightmap.grid(), heightmap.width, heightmap.height),
        minimum=float(interior.min()),
        maximum=float(interior.max()),
    )
