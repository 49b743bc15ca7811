"""
Exceptions raised by terrain generation and rendering.
"""


class TerrainError(Exception):
    """Base class for fault terrain errors."""


class InvalidConfigurationError(TerrainError, ValueError):
    """Raised when grid dimensions or generation parameters are unusable."""


class SamplingError(TerrainError, RuntimeError):
    """Raised when a random source keeps producing identical fault points."""
