import math
import random
import numbers
from functools import cmp_to_key

import numpy as np
from scipy.spatial import KDTree

from penrose_geometry import TOL, psi, phi, is_close
from penrose_tiles import BtileL, BtileS

# Default configuration
DEFAULT_CONFIG = {
    'width': '100%',
    'height': '100%',
    'stroke-colour': '#fff',
    'base-stroke-width': 0.05,
    'margin': 1.05,
    'tile-opacity': 0.6,
    'random-tile-colours': False,
    'Stile-colour': '#08f',
    'Ltile-colour': '#0035f3',
    'Aarc-colour': '#f00',
    'Carc-colour': '#00f',
    'draw-tiles': True,
    'draw-arcs': False,
    'reflect-x': True,
    'draw-rhombuses': True,
    'rotate': 0,
    'flip-y': False,
    'flip-x': False,
}


def compare_centres(a, b):
    """
    Order two rhombus centres by real part, falling back to the imaginary
    part when the real parts agree to within TOL. Centres equal to within
    TOL in both parts compare equal.
    """
    if abs(a.real - b.real) < TOL:
        if abs(a.imag - b.imag) < TOL:
            return 0
        return -1 if a.imag < b.imag else 1
    return -1 if a.real < b.real else 1


class PenroseP3:
    """A class representing the P3 Penrose tiling."""

    def __init__(self, scale=200, ngen=4, config=None):
        """
        Initialise the PenroseP3 instance with a scale determining the size
        of the final image and the number of generations, ngen, to inflate
        the initial triangles. Further configuration is provided through the
        key, value pairs of the optional config dictionary.
        """
        if not isinstance(scale, numbers.Real) or not scale > 0:
            raise ValueError(f"scale must be a positive number, got {scale!r}")
        if (isinstance(ngen, bool) or not isinstance(ngen, numbers.Integral)
                or ngen < 0):
            raise ValueError(f"ngen must be a non-negative integer, got {ngen!r}")

        self.scale = scale
        self.ngen = ngen

        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)
        # And ensure width, height values are strings for the SVG
        self.config['width'] = str(self.config['width'])
        self.config['height'] = str(self.config['height'])

        self.elements = []

    def set_initial_tiles(self, tiles):
        self.elements = list(tiles)

    def inflate(self):
        """"Inflate" each triangle in the tiling ensemble."""
        new_elements = []
        for element in self.elements:
            new_elements.extend(element.inflate())
        self.elements = new_elements

    def remove_dupes(self):
        """
        Remove triangles giving rise to identical rhombuses from the
        ensemble.

        Triangles give rise to identical rhombuses if these rhombuses have
        the same centre. Only neighbours in the sorted order are compared.
        """
        selements = sorted(self.elements,
                           key=cmp_to_key(lambda e1, e2: compare_centres(
                               e1.centre(), e2.centre())))
        if not selements:
            return
        self.elements = [selements[0]]
        last_centre = selements[0].centre()
        for element in selements[1:]:
            centre = element.centre()
            if not is_close(centre, last_centre):
                self.elements.append(element)
                last_centre = centre

    def add_conjugate_elements(self):
        """Extend the tiling by reflection about the x-axis."""
        self.elements.extend([e.conjugate() for e in self.elements])

    def rotate(self, theta):
        """Rotate the figure anti-clockwise by theta radians."""
        rot = math.cos(theta) + 1j * math.sin(theta)
        self.elements = [type(e)(rot * e.A, rot * e.B, rot * e.C)
                         for e in self.elements]

    def flip_y(self):
        """Flip the figure about the y-axis."""
        self.elements = [type(e)(-e.A.conjugate(), -e.B.conjugate(),
                                 -e.C.conjugate())
                         for e in self.elements]

    def flip_x(self):
        """Flip the figure about the x-axis."""
        self.elements = [e.conjugate() for e in self.elements]

    def _validate_elements(self):
        if not self.elements:
            raise ValueError("No initial tiles: call set_initial_tiles first")
        for i, e in enumerate(self.elements):
            if not e.is_finite():
                raise ValueError(f"Tile {i} has non-finite vertices: {e!r}")

    def make_tiling(self, verbose=False):
        """Make the Penrose tiling by inflating ngen times."""
        self._validate_elements()

        for gen in range(self.ngen):
            self.inflate()
            if verbose:
                print(f"  Generation {gen + 1}/{self.ngen}: "
                      f"{len(self.elements)} triangles")
        if self.config['draw-rhombuses']:
            self.remove_dupes()
        if self.config['reflect-x']:
            self.add_conjugate_elements()
            self.remove_dupes()

        # Rotate the figure anti-clockwise by theta radians.
        theta = self.config['rotate']
        if theta:
            self.rotate(theta)

        # Flip the image about the y-axis (note this occurs _after_ any
        # rotation).
        if self.config['flip-y']:
            self.flip_y()

        # Flip the image about the x-axis (note this occurs _after_ any
        # rotation and after any flip about the y-axis).
        if self.config['flip-x']:
            self.flip_x()

        if verbose:
            print(f"  Tiling has {len(self.elements)} tiles")

    def get_tile_colour(self, e):
        """Return a HTML-style colour string for the tile."""
        if self.config['random-tile-colours']:
            # Return a random colour as '#xxx'
            return '#{:03x}'.format(random.randint(0, 0xfff))

        # Return the colour string, or call the colour function as appropriate
        if isinstance(e, BtileL):
            colour = self.config['Ltile-colour']
        else:
            colour = self.config['Stile-colour']
        if callable(colour):
            return colour(e)
        return colour

    def make_svg(self):
        """Make and return the SVG for the tiling as a str."""
        xmin = ymin = -self.scale * self.config['margin']
        width = height = 2 * self.scale * self.config['margin']
        viewbox = '{} {} {} {}'.format(xmin, ymin, width, height)
        svg = ['<?xml version="1.0" encoding="utf-8"?>',
               '<svg width="{}" height="{}" viewBox="{}"'
               ' preserveAspectRatio="xMidYMid meet" version="1.1"'
               ' baseProfile="full" xmlns="http://www.w3.org/2000/svg">'
               .format(self.config['width'], self.config['height'], viewbox)]
        # The tiles' stroke widths scale with ngen
        stroke_width = str(psi ** self.ngen * self.scale
                           * self.config['base-stroke-width'])
        svg.append('<g style="stroke:{}; stroke-width: {};'
                   ' stroke-linejoin: round;">'
                   .format(self.config['stroke-colour'], stroke_width))
        draw_rhombuses = self.config['draw-rhombuses']
        for e in self.elements:
            if self.config['draw-tiles']:
                svg.append('<path fill="{}" fill-opacity="{}" d="{}"/>'
                           .format(self.get_tile_colour(e),
                                   self.config['tile-opacity'],
                                   e.path(rhombus=draw_rhombuses)))
            if self.config['draw-arcs']:
                arc1_d, arc2_d = e.arcs(half_arc=not draw_rhombuses)
                svg.append('<path fill="none" stroke="{}" d="{}"/>'
                           .format(self.config['Aarc-colour'], arc1_d))
                svg.append('<path fill="none" stroke="{}" d="{}"/>'
                           .format(self.config['Carc-colour'], arc2_d))
        svg.append('</g>\n</svg>')
        return '\n'.join(svg)

    def write_svg(self, filename):
        """Make and write the SVG for the tiling to filename."""
        svg = self.make_svg()
        with open(filename, 'w') as fo:
            fo.write(svg)

    def centres(self):
        """Return the rhombus centres as an (N, 2) array."""
        return np.array([[c.real, c.imag] for c in
                         (e.centre() for e in self.elements)],
                        dtype=np.float64).reshape(-1, 2)

    def vertex_array(self):
        """Return the triangle vertices as an (N, 3, 2) array."""
        return np.array([[[v.real, v.imag] for v in e.vertices()]
                         for e in self.elements],
                        dtype=np.float64).reshape(-1, 3, 2)

    def count_coincident_centres(self, tol=TOL):
        """
        Count the pairs of tiles whose rhombus centres lie within tol of one
        another, i.e. the duplicates remove_dupes has left behind.
        """
        centres = self.centres()
        if len(centres) < 2:
            return 0
        tree = KDTree(centres)
        return len(tree.query_pairs(r=tol))

    def get_statistics(self):
        """Return statistics about the tiling."""
        large_count = sum(1 for e in self.elements if isinstance(e, BtileL))
        small_count = sum(1 for e in self.elements if isinstance(e, BtileS))
        total = len(self.elements)

        return {
            'total': total,
            'large': large_count,
            'small': small_count,
            'large_to_small_ratio': large_count / small_count if small_count > 0 else 0,
            'expected_ratio': phi,
            'coincident_centres': self.count_coincident_centres(),
        }
