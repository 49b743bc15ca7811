#!/usr/bin/env python3
"""
Visualize a fault terrain.
Generates an image with the raw heightmap next to its palette rendering.
"""

import argparse

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from fault_terrain.core import FaultConfig, FaultTerrain, NumpyRandomSource, palette_name, summarize


def visualize_terrain(width=128, height=128, iterations=500, seed=None, output_file=None):
    """
    Generate and visualize a fault terrain.

    Args:
        width: Terrain width
        height: Terrain height
        iterations: Number of fault lines
        seed: Random seed
        output_file: PNG path, derived from the parameters when omitted
    """
    print(f"Generating {width}x{height} terrain with {iterations} faults...")

    config = FaultConfig(width=width, height=height, iterations=iterations)
    terrain = FaultTerrain(config, NumpyRandomSource(seed))
    snapshot = terrain.initialize()

    stats = summarize(snapshot.heightmap)
    render = snapshot.render
    print(f"\nHeightmap statistics:")
    print(f"  Min height: {stats.minimum:.2f}")
    print(f"  Max height: {stats.maximum:.2f}")
    print(f"  Mean height: {stats.mean:.2f}")
    print(f"  Palette: {palette_name(render.palette)}")
    print(f"  Generation time: {snapshot.generation_seconds:.3f}s")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 8))

    # Buffers are x-major, transpose so x runs along the image's horizontal axis
    im = ax1.imshow(
        snapshot.heightmap.interior().T,
        origin="lower",
        cmap="terrain",
        aspect="equal",
    )
    plt.colorbar(im, ax=ax1, label="Height")
    ax1.set_title(f"Fault heightmap\n{iterations} iterations")
    ax1.set_xlabel("X")
    ax1.set_ylabel("Y")

    pixels = render.to_rgba32().reshape(width, height, 4).transpose(1, 0, 2)
    ax2.imshow(pixels, origin="lower", aspect="equal")
    ax2.set_title(f"Rendered terrain - {palette_name(render.palette)}\nmean height {render.mean_height:.2f}")
    ax2.set_xlabel("X")
    ax2.set_ylabel("Y")

    if output_file is None:
        output_file = f"terrain_{width}x{height}_{iterations}_{seed}.png"
    plt.savefig(output_file, dpi=150, bbox_inches="tight", pad_inches=0.1)
    plt.close(fig)
    print(f"Terrain image saved to: {output_file}")
    return output_file


def main():
    """Main function to generate visualizations."""
    parser = argparse.ArgumentParser(description="Render a fault terrain to PNG")
    parser.add_argument("--width", type=int, default=128)
    parser.add_argument("--height", type=int, default=128)
    parser.add_argument("--iterations", type=int, default=500)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=None)
    args = parser.parse_args()

    visualize_terrain(
        width=args.width,
        height=args.height,
        iterations=args.iterations,
        seed=args.seed,
        output_file=args.output,
    )


if __name__ == "__main__":
    main()
