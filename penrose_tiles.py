import math

from penrose_geometry import psi, psi2, cross, middle, line, arc, is_finite_point


class RobinsonTriangle:
    """
    A class representing a Robinson triangle and the rhombus formed from it.
    """

    def __init__(self, A, B, C):
        """
        Initialize the triangle with the ordered vertices. A and C are the
        vertices at the equal base angles; B is at the vertex angle.
        """
        self.A = A
        self.B = B
        self.C = C

    def __repr__(self):
        return '{}({!r}, {!r}, {!r})'.format(
            type(self).__name__, self.A, self.B, self.C)

    def vertices(self):
        """Return the 3 vertices of the triangle."""
        return [self.A, self.B, self.C]

    def centre(self):
        """
        Return the position of the centre of the rhombus formed from two
        triangles joined by their bases.
        """
        return middle(self.A, self.C)

    def area(self):
        return abs(cross(self.B - self.A, self.C - self.A)) / 2

    def angles(self):
        """Return the interior angles at A, B and C, in degrees."""
        def angle_at(U, V, W):
            return math.degrees(abs(math.atan2(cross(V - U, W - U),
                                               ((V - U) * (W - U).conjugate()).real)))
        return (angle_at(self.A, self.B, self.C),
                angle_at(self.B, self.C, self.A),
                angle_at(self.C, self.A, self.B))

    def is_finite(self):
        return all(is_finite_point(v) for v in self.vertices())

    def path(self, rhombus=True):
        """
        Return the SVG "d" path element specifier for the rhombus formed
        by this triangle and its mirror image joined along their bases. If
        rhombus = False, the path for the triangle itself is returned instead.
        """
        AB = self.B - self.A
        BC = self.C - self.B
        if rhombus:
            return line(self.A, AB, BC, -AB)
        return line(self.A, AB, BC)

    def get_arc_d(self, U, V, W, half_arc=False):
        """
        Return the SVG "d" path element specifier for the circular arc between
        sides UV and UW, joined at half-distance along these sides. If
        half_arc is True, the arc is at the vertex of a rhombus; if half_arc
        is False, the arc is drawn for the corresponding vertices of a
        Robinson triangle.
        """
        start = middle(U, V)
        end = middle(U, W)
        # arc radius
        r = abs((V - U) / 2)

        if half_arc:
            # Find the endpoint of the "half-arc" terminating on the triangle
            # base
            UN = V + W - 2 * U
            end = U + r * UN / abs(UN)

        # ensure we draw the arc for the angular component < 180 deg
        US, UE = start - U, end - U
        if cross(US, UE) > 0:
            start, end = end, start
        return arc(start, r, end)

    def arcs(self, half_arc=False):
        """
        Return the SVG "d" path element specifiers for the two circular arcs
        about vertices A and C. If half_arc is True, the arc is at the vertex
        of a rhombus; if half_arc is False, the arc is drawn for the
        corresponding vertices of a Robinson triangle.
        """
        D = self.A - self.B + self.C
        arc1_d = self.get_arc_d(self.A, self.B, D, half_arc)
        arc2_d = self.get_arc_d(self.C, self.B, D, half_arc)
        return arc1_d, arc2_d

    def conjugate(self):
        """
        Return the reflection of this triangle about the x-axis, as the
        same kind of tile.
        """
        return type(self)(self.A.conjugate(), self.B.conjugate(),
                          self.C.conjugate())

    def inflate(self):
        raise NotImplementedError


class BtileL(RobinsonTriangle):
    """
    A class representing a "B_L" Penrose tile in the P3 tiling scheme as
    a "large" Robinson triangle (sides in ratio 1:1:phi).
    """

    def inflate(self):
        """
        "Inflate" this tile, returning the three resulting Robinson triangles
        in a list.
        """
        # D and E divide sides AC and AB respectively
        D = psi2 * self.A + psi * self.C
        E = psi2 * self.A + psi * self.B
        # Take care to order the vertices here so as to get the right
        # orientation for the resulting triangles.
        return [BtileL(D, E, self.A),
                BtileS(E, D, self.B),
                BtileL(self.C, D, self.B)]


class BtileS(RobinsonTriangle):
    """
    A class representing a "B_S" Penrose tile in the P3 tiling scheme as
    a "small" Robinson triangle (sides in ratio 1:1:psi).
    """

    def inflate(self):
        """
        "Inflate" this tile, returning the two resulting Robinson triangles
        in a list.
        """
        D = psi * self.A + psi2 * self.B
        return [BtileS(D, self.C, self.A),
                BtileL(self.C, D, self.B)]
