#!/usr/bin/env python3
"""
Simple demo script showing fault terrain generation.
"""

import numpy as np
from fault_terrain.core import FaultConfig, FaultTerrain, NumpyRandomSource, Palette, palette_name, summarize

GLYPHS = {True: "~", False: "#"}


def main():
    """Demonstrate fault terrain generation."""
    print("Fault Terrain Demo")
    print("=" * 40)

    width, height = 60, 24
    config = FaultConfig(width=width, height=height, iterations=200)
    terrain = FaultTerrain(config, NumpyRandomSource(1234))

    snapshot = terrain.initialize()
    stats = summarize(snapshot.heightmap)
    print(f"\nGenerated {width}x{height} terrain in {snapshot.generation_seconds:.3f}s")
    print(f"  Height range: {stats.minimum:.2f}-{stats.maximum:.2f}")
    print(f"  Average height: {stats.mean:.2f}")

    # Cells below the mean print as water
    below = snapshot.heightmap.interior() < stats.mean
    print(f"  Below mean: {np.sum(below)} cells ({np.mean(below) * 100:.1f}%)")
    print()
    for y in range(height):
        print("".join(GLYPHS[bool(below[x, y])] for x in range(width)))

    print("\nRedrawing the same heightmap with every palette:")
    for palette in Palette:
        render = terrain.renderer.render(snapshot.heightmap, palette=palette)
        low = sum(1 for c in render.colors if c == render.colors[0])
        print(f"  {palette_name(palette)}: first cell {render.colors[0].to_hex()}, {low} cells share it")

    print("\nRegenerating...")
    snapshot = terrain.on_regenerate_requested()
    print(f"  New average height: {terrain.mean_height:.2f}, palette {palette_name(terrain.palette)}")


if __name__ == "__main__":
    main()
