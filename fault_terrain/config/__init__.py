"""
Configuration modules for terrain generation.
"""

from .config import Settings, settings
from .palettes import PALETTES, get_palette, list_palettes

__all__ = ['Settings', 'settings', 'PALETTES', 'get_palette', 'list_palettes']
