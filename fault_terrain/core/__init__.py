"""
Core fault terrain generation functionality.
"""

from .errors import TerrainError, InvalidConfigurationError, SamplingError
from .geometry import Vector2, subtract, perp_dot_product, perp_dot_side
from .interpolation import lerp
from .heightmap import Heightmap
from .random_source import RandomSource, NumpyRandomSource, ScriptedRandomSource
from .fault_generator import FaultConfig, FaultGenerator
from .statistics import HeightStatistics, average_height, summarize
from .colors import Color, Palette, classify, palette_name
from .renderer import GridRenderer, RenderResult, select_palette
from .terrain import FaultTerrain, TerrainSnapshot

__all__ = ['TerrainError', 'InvalidConfigurationError', 'SamplingError',
           'Vector2', 'subtract', 'perp_dot_product', 'perp_dot_side', 'lerp',
           'Heightmap', 'RandomSource', 'NumpyRandomSource', 'ScriptedRandomSource',
           'FaultConfig', 'FaultGenerator', 'HeightStatistics', 'average_height', 'summarize',
           'Color', 'Palette', 'classify', 'palette_name',
           'GridRenderer', 'RenderResult', 'select_palette',
           'FaultTerrain', 'TerrainSnapshot']
