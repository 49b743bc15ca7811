"""
Fault Formation terrain heightmaps and their color rendering.
"""

__version__ = "0.1.0"
