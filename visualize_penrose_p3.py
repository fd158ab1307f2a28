import math
import time
import argparse

import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from penrose_p3 import PenroseP3
from penrose_seeds import SEEDS


def tile_outline(e, rhombus=True):
    """Return the outline of a tile as a list of [x, y] pairs."""
    verts = e.vertices()
    if rhombus:
        verts.append(e.A - e.B + e.C)
    return [[v.real, v.imag] for v in verts]


def visualize_penrose_tiling(tiling, title="Penrose P3 Tiling"):
    """
    Visualize the Penrose tiling using matplotlib.

    Args:
        tiling: PenroseP3 instance, after make_tiling()
        title: Plot title

    Returns:
        (fig, ax) with one polygon patch per tile
    """
    fig, ax = plt.subplots(figsize=(12, 12), dpi=100)

    config = tiling.config
    rhombus = config['draw-rhombuses']
    for e in tiling.elements:
        poly = Polygon(tile_outline(e, rhombus),
                       facecolor=tiling.get_tile_colour(e),
                       alpha=config['tile-opacity'],
                       edgecolor='black', linewidth=0.3)
        ax.add_patch(poly)

    limit = tiling.scale * config['margin']
    ax.set_xlim(-limit, limit)
    # SVG y runs downwards
    ax.set_ylim(limit, -limit)
    ax.set_aspect('equal', adjustable='box')
    ax.axis('off')
    ax.set_title(title, fontsize=16, pad=20)
    plt.tight_layout()
    return fig, ax


def build_parser():
    parser = argparse.ArgumentParser(description='Penrose P3 (rhombus) tiling SVG generator')
    parser.add_argument('-g', '--ngen', type=int, default=4, metavar='generations',
                        help='Number of inflation generations applied to the seed tiles')
    parser.add_argument('-s', '--scale', type=float, default=100.0,
                        help='Size of the figure (radius of the viewBox before the margin)')
    parser.add_argument('--seed', choices=sorted(SEEDS), default='star',
                        help='Initial tile arrangement')
    parser.add_argument('-o', '--output', default='penrose_p3.svg',
                        help='SVG output file')
    parser.add_argument('--png', default=None,
                        help='Also save a matplotlib preview to this PNG file')
    parser.add_argument('--arcs', action='store_true',
                        help='Draw the matching-rule arcs')
    parser.add_argument('--no-tiles', action='store_true',
                        help='Do not fill the tiles')
    parser.add_argument('--triangles', action='store_true',
                        help='Draw Robinson triangles instead of rhombuses')
    parser.add_argument('--no-reflect', action='store_true',
                        help='Do not complete the figure by reflection about the x-axis')
    parser.add_argument('--rotate', type=float, default=0.0, metavar='degrees',
                        help='Rotate the figure anti-clockwise')
    parser.add_argument('--flip-x', action='store_true', help='Flip about the x-axis')
    parser.add_argument('--flip-y', action='store_true', help='Flip about the y-axis')
    parser.add_argument('--random-colours', action='store_true',
                        help='Give each tile a random colour')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.ngen < 0:
        parser.error("--ngen must be >= 0")
    if not (math.isfinite(args.scale) and args.scale > 0):
        parser.error("--scale must be a finite number > 0")

    config = {
        'draw-arcs': args.arcs,
        'draw-tiles': not args.no_tiles,
        'draw-rhombuses': not args.triangles,
        'reflect-x': not args.no_reflect,
        'rotate': math.radians(args.rotate),
        'flip-x': args.flip_x,
        'flip-y': args.flip_y,
        'random-tile-colours': args.random_colours,
    }

    print("=" * 60)
    print("PENROSE P3 TILING")
    print("=" * 60)
    print(f"\nGenerating '{args.seed}' tiling with {args.ngen} generations...")

    tiling = PenroseP3(scale=args.scale, ngen=args.ngen, config=config)
    tiling.set_initial_tiles(SEEDS[args.seed](args.scale))
    t0 = time.time()
    tiling.make_tiling(verbose=True)
    t1 = time.time()
    print(f"✓ Generated {len(tiling.elements)} tiles in {t1 - t0:.2f}s")

    stats = tiling.get_statistics()
    print(f"  Large tiles: {stats['large']}")
    print(f"  Small tiles: {stats['small']}")
    print(f"  Ratio large/small: {stats['large_to_small_ratio']:.4f} "
          f"(tends to φ ≈ {stats['expected_ratio']:.4f})")
    if stats['coincident_centres']:
        print(f"  Warning: {stats['coincident_centres']} coincident tile pairs remain")

    tiling.write_svg(args.output)
    print(f"  Saved: {args.output}")

    if args.png:
        fig, _ = visualize_penrose_tiling(
            tiling, title=f"Penrose P3 Tiling ({args.ngen} generations)")
        fig.savefig(args.png, dpi=150, bbox_inches='tight')
        plt.close(fig)
        print(f"  Saved: {args.png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
