"""
Generate-then-render lifecycle for a single terrain.

Hosts call ``initialize()`` once and ``on_regenerate_requested()`` whenever
their input asks for a new terrain; nothing here polls input or timers.
Calls must be serialized by the host.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

import structlog

from .colors import Color
from .errors import TerrainError
from .fault_generator import FaultConfig, FaultGenerator
from .heightmap import Heightmap
from .random_source import RandomSource
from .renderer import ColorSink, GridRenderer, RenderResult

logger = structlog.get_logger()


@dataclass
class TerrainSnapshot:
    """Result of one generate-and-render pass."""

    heightmap: Heightmap
    render: RenderResult
    generation_seconds: float


class FaultTerrain:
    """Owns the current heightmap and its latest rendering."""

    def __init__(
        self,
        config: FaultConfig,
        random_source: Optional[RandomSource] = None,
        sink: Optional[ColorSink] = None,
    ):
        """
        Args:
            config: Fault formation configuration
            random_source: Shared by generation and palette selection
            sink: Receives every freshly rendered color buffer
        """
        self.config = config
        self.random_source = random_source if random_source is not None else random.Random()
        self.generator = FaultGenerator(config, self.random_source)
        self.renderer = GridRenderer(self.random_source, sink)

        self.heightmap: Optional[Heightmap] = None
        self.last_render: Optional[RenderResult] = None
        self.generation_seconds: Optional[float] = None

    @property
    def colors(self) -> List[Color]:
        return self.last_render.colors if self.last_render else []

    @property
    def mean_height(self) -> Optional[float]:
        return self.last_render.mean_height if self.last_render else None

    @property
    def palette(self) -> Optional[int]:
        return self.last_render.palette if self.last_render else None

    def _generate_and_render(self) -> TerrainSnapshot:
        heightmap = self.generator.generate()
        elapsed = heightmap.generation_seconds

        self.heightmap = heightmap
        self.generation_seconds = elapsed
        self.last_render = self.renderer.render(heightmap)

        return TerrainSnapshot(heightmap=heightmap, render=self.last_render, generation_seconds=elapsed)

    def initialize(self) -> TerrainSnapshot:
        """Generate the first terrain and render it."""
        logger.info("Initializing fault terrain", width=self.config.width, height=self.config.height)
        return self._generate_and_render()

    def on_regenerate_requested(self) -> TerrainSnapshot:
        """Replace the heightmap with a newly generated one and render it."""
        logger.info("Regenerating fault terrain", width=self.config.width, height=self.config.height)
        return self._generate_and_render()

    def redraw(self) -> RenderResult:
        """Render the current heightmap again with a newly drawn palette."""
        if self.heightmap is None:
            raise TerrainError("Terrain has not been generated yet")
        self.last_render = self.renderer.render(self.heightmap)
        return self.last_render
