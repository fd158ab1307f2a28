import math

import pytest

from penrose_geometry import psi
from penrose_seeds import star, sun
from penrose_tiles import RobinsonTriangle, BtileL, BtileS

LARGE_ANGLES = (36.0, 108.0, 36.0)
SMALL_ANGLES = (72.0, 36.0, 72.0)


def parse_arc(d):
    """Return (start, r, end) from an arc 'd' specifier."""
    parts = d.split()
    assert parts[0] == 'M' and parts[3] == 'A'
    start = complex(float(parts[1]), float(parts[2]))
    end = complex(float(parts[9]), float(parts[10]))
    assert parts[4] == parts[5]
    assert parts[6:9] == ['0', '0', '0']
    return start, float(parts[4]), end


def inflate_generations(tiles, n):
    for _ in range(n):
        tiles = [child for t in tiles for child in t.inflate()]
    return tiles


class TestRobinsonTriangle:
    def setup_method(self):
        self.t = BtileL(0j, 1 + 1j, 2 + 0j)

    def test_centre(self):
        assert self.t.centre() == 1 + 0j

    def test_rhombus_path(self):
        assert self.t.path() == 'm0.0,0.0 l1.0,1.0 l1.0,-1.0 l-1.0,-1.0z'

    def test_triangle_path(self):
        assert self.t.path(rhombus=False) == 'm0.0,0.0 l1.0,1.0 l1.0,-1.0z'

    def test_arcs(self):
        arc1, arc2 = self.t.arcs()
        r = math.sqrt(2) / 2

        start, radius, end = parse_arc(arc1)
        assert radius == pytest.approx(r)
        assert start == pytest.approx(0.5 + 0.5j)
        assert end == pytest.approx(0.5 - 0.5j)

        # The arc about C is swapped so that it sweeps the minor angle
        start, radius, end = parse_arc(arc2)
        assert radius == pytest.approx(r)
        assert start == pytest.approx(1.5 - 0.5j)
        assert end == pytest.approx(1.5 + 0.5j)

    def test_half_arc(self):
        arc1, _ = self.t.arcs(half_arc=True)
        start, radius, end = parse_arc(arc1)
        assert start == pytest.approx(0.5 + 0.5j)
        # The half-arc ends on the triangle base, a radius from A
        assert end == pytest.approx(complex(radius, 0))

    def test_conjugate_keeps_tile_kind(self):
        tL = self.t.conjugate()
        assert type(tL) is BtileL
        assert tL.vertices() == [0j, 1 - 1j, 2 + 0j]
        tS = BtileS(1 + 2j, 3 + 4j, 5 + 6j).conjugate()
        assert type(tS) is BtileS
        assert tS.vertices() == [1 - 2j, 3 - 4j, 5 - 6j]

    def test_conjugate_is_new_triangle(self):
        c = self.t.conjugate()
        assert c is not self.t
        assert self.t.B == 1 + 1j

    def test_base_class_does_not_inflate(self):
        with pytest.raises(NotImplementedError):
            RobinsonTriangle(0j, 1j, 1 + 0j).inflate()

    def test_is_finite(self):
        assert self.t.is_finite()
        assert not BtileL(complex(float('nan'), 0), 1j, 1 + 0j).is_finite()


class TestInflation:
    def test_large_tile_children(self):
        parent = star(100)[0]
        children = parent.inflate()
        assert [type(c) for c in children] == [BtileL, BtileS, BtileL]
        assert sum(c.area() for c in children) == pytest.approx(parent.area())

    def test_small_tile_children(self):
        parent = sun(100)[0]
        children = parent.inflate()
        assert [type(c) for c in children] == [BtileS, BtileL]
        assert sum(c.area() for c in children) == pytest.approx(parent.area())

    def test_large_tile_vertex_order(self):
        A, B, C = 0j, 1 + 1j, 2 + 0j
        D = A * (1 - psi) + C * psi
        E = A * (1 - psi) + B * psi
        children = BtileL(A, B, C).inflate()
        assert children[0].vertices() == pytest.approx([D, E, A])
        assert children[1].vertices() == pytest.approx([E, D, B])
        assert children[2].vertices() == pytest.approx([C, D, B])

    def test_small_tile_vertex_order(self):
        A, B, C = 0j, 1 + 3j, 2 + 0j
        D = A * psi + B * (1 - psi)
        children = BtileS(A, B, C).inflate()
        assert children[0].vertices() == pytest.approx([D, C, A])
        assert children[1].vertices() == pytest.approx([C, D, B])

    def test_seed_angles(self):
        for t in star(100):
            assert t.angles() == pytest.approx(LARGE_ANGLES)
        for t in sun(100):
            assert t.angles() == pytest.approx(SMALL_ANGLES)

    @pytest.mark.parametrize("seed", [star, sun])
    def test_similarity_preserved(self, seed):
        tiles = seed(100)
        for gen in range(5):
            tiles = inflate_generations(tiles, 1)
            for t in tiles:
                expected = LARGE_ANGLES if isinstance(t, BtileL) else SMALL_ANGLES
                assert t.angles() == pytest.approx(expected, abs=1e-6)

    def test_area_preserved_over_generations(self):
        tiles = star(100)
        total = sum(t.area() for t in tiles)
        tiles = inflate_generations(tiles, 4)
        assert sum(t.area() for t in tiles) == pytest.approx(total)

    def test_edges_shrink_by_psi(self):
        parent = sun(100)[0]
        child = parent.inflate()[0]
        assert abs(child.B - child.A) == pytest.approx(psi * abs(parent.B - parent.A))
