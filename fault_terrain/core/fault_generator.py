"""
Fault Formation heightmap generation.

Each iteration picks two random points, treats the line through them as a
fault and raises every grid point on one side of it. The raise amount decays
linearly from ``max_change`` to ``min_change`` over the run, so later faults
perturb the terrain less.

The side test runs as one numpy mask over the flat heightmap buffer per
iteration instead of a per-cell loop.
"""

import math
import numbers
import random
import time
from dataclasses import dataclass
from typing import Optional

import numpy as np
import structlog

from .errors import InvalidConfigurationError, SamplingError
from .geometry import Vector2, perp_dot_side, subtract
from .heightmap import Heightmap
from .interpolation import lerp
from .random_source import RandomSource

logger = structlog.get_logger()

# Cap on attempts to draw two distinct fault points
MAX_POINT_ATTEMPTS = 50


@dataclass
class FaultConfig:
    """Configuration for fault formation."""

    width: int
    height: int
    iterations: int = 500
    max_change: float = 1.25  # height delta at the first iteration
    min_change: float = 0.25  # height delta approached at the last iteration

    def __post_init__(self):
        for name in ("width", "height", "iterations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
        for name in ("max_change", "min_change"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise InvalidConfigurationError(f"{name} must be a real number, got {value!r}")

        if self.width <= 0 or self.height <= 0:
            raise InvalidConfigurationError(
                f"Terrain dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.iterations < 0:
            raise InvalidConfigurationError(
                f"Iteration count must not be negative, got {self.iterations}"
            )
        if not (math.isfinite(self.max_change) and math.isfinite(self.min_change)):
            raise InvalidConfigurationError(
                f"Height changes must be finite, got {self.max_change} and {self.min_change}"
            )

    @classmethod
    def from_settings(cls, settings) -> "FaultConfig":
        """Build a config from application settings."""
        return cls(
            width=settings.terrain_width,
            height=settings.terrain_height,
            iterations=settings.fault_iterations,
            max_change=settings.max_change,
            min_change=settings.min_change,
        )


class FaultGenerator:
    """
    Generates heightmaps with the Fault Formation algorithm.

    The generator keeps no grid state between calls: every ``generate()``
    allocates a fresh zeroed heightmap.
    """

    def __init__(self, config: FaultConfig, random_source: Optional[RandomSource] = None):
        """
        Initialize the fault generator.

        Args:
            config: Fault formation configuration
            random_source: Object with a ``random()`` method; defaults to a
                fresh unseeded ``random.Random``
        """
        self.config = config
        self.random_source = random_source if random_source is not None else random.Random()

    def delta_for_iteration(self, iteration: int) -> float:
        """Height change applied during ``iteration``."""
        if self.config.iterations == 0:
            return self.config.max_change
        return lerp(
            self.config.max_change,
            self.config.min_change,
            iteration / self.config.iterations,
        )

    def _random_point(self, extended_width: int, extended_height: int) -> Vector2:
        return Vector2(
            self.random_source.random() * extended_width,
            self.random_source.random() * extended_height,
        )

    def _pick_fault_points(self, extended_width: int, extended_height: int):
        """Choose two different random points of the extended grid."""
        for attempt in range(MAX_POINT_ATTEMPTS):
            point1 = self._random_point(extended_width, extended_height)
            point2 = self._random_point(extended_width, extended_height)
            if point1 != point2:
                return point1, point2
            logger.debug("Fault points coincide, resampling", attempt=attempt + 1, point=tuple(point1))

        raise SamplingError(
            f"Random source returned identical fault points {MAX_POINT_ATTEMPTS} times in a row"
        )

    def apply_fault(self, heightmap: Heightmap, point1: Vector2, point2: Vector2, delta: float) -> int:
        """
        Raise every extended-grid point on the negative side of a fault.

        Args:
            heightmap: Heightmap to modify in place
            point1: Start of the fault line
            point2: End of the fault line
            delta: Height added to affected points

        Returns:
            Number of raised grid points
        """
        xs, ys = heightmap.coordinates()
        fault_line = subtract(point2, point1)
        raised = perp_dot_side(subtract(Vector2(xs, ys), point1), fault_line)
        heightmap.heights[raised] += delta
        return int(np.count_nonzero(raised))

    def generate(self) -> Heightmap:
        """
        Run all fault iterations on a fresh heightmap.

        Returns:
            Heightmap of shape ``(width + 1, height + 1)`` with
            ``generation_seconds`` set to the elapsed wall time
        """
        config = self.config
        start = time.perf_counter()
        heightmap = Heightmap(config.width, config.height)
        extended_width, extended_height = heightmap.shape

        for i in range(config.iterations):
            delta = self.delta_for_iteration(i)
            point1, point2 = self._pick_fault_points(extended_width, extended_height)
            self.apply_fault(heightmap, point1, point2, delta)

        elapsed = time.perf_counter() - start
        heightmap.generation_seconds = elapsed
        logger.info(
            "Fault heightmap generated",
            width=config.width,
            height=config.height,
            iterations=config.iterations,
            elapsed_seconds=round(elapsed, 4),
        )
        return heightmap
