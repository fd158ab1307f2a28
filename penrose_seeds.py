"""
Initial triangle sets for PenroseP3.

Each builder returns one half of a figure that is symmetric about the x-axis;
the other half is supplied by the 'reflect-x' option of the tiling.
"""
import math
import cmath

from penrose_geometry import psi
from penrose_tiles import BtileL, BtileS


def star(scale):
    """
    A five-pointed star of "large" rhombuses meeting at the origin. Each
    triangle has its A vertex at the origin and C at scale * e^(2 pi i k / 5).
    """
    tiles = []
    for k in range(5):
        theta = 2 * math.pi * k / 5
        C = cmath.rect(scale, theta)
        B = cmath.rect(psi * scale, theta + math.pi / 5)
        tiles.append(BtileL(0j, B, C))
    return tiles


def sun(scale):
    """
    A semicircle of five "small" triangles with their apexes at the origin,
    which reflection completes into a decagonal sun.
    """
    tiles = []
    for k in range(5):
        lo = cmath.rect(scale, k * math.pi / 5)
        hi = cmath.rect(scale, (k + 1) * math.pi / 5)
        # Alternate the orientation so that neighbours share base vertices
        if k % 2 == 0:
            tiles.append(BtileS(lo, 0j, hi))
        else:
            tiles.append(BtileS(hi, 0j, lo))
    return tiles


def rhombus(scale):
    """
    Half of a single "large" rhombus with its long diagonal running from
    -scale to scale along the x-axis.
    """
    side = 2 * psi * scale
    B = 1j * side * math.sin(math.pi / 5)
    return [BtileL(-scale + 0j, B, scale + 0j)]


SEEDS = {
    'star': star,
    'sun': sun,
    'rhombus': rhombus,
}
