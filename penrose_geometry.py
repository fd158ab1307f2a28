import math

# Points in the plane are stored as complex numbers, x + iy.

# A small tolerance for comparing floats for equality
TOL = 1e-5

# Golden ratio
phi = (5 ** 0.5 + 1) / 2
# psi = 1/phi, the scale factor between generations
psi = (5 ** 0.5 - 1) / 2
# psi**2 = 1 - psi
psi2 = 1 - psi


def cross(a, b):
    """Return the z-component of the 2D cross product a x b."""
    return a.real * b.imag - a.imag * b.real


def middle(a, b):
    """Return the midpoint of a and b."""
    return (a + b) / 2


def is_close(a, b, tol=TOL):
    """True if the points a and b are within tol of one another."""
    return abs(a - b) < tol


def is_finite_point(z):
    return math.isfinite(z.real) and math.isfinite(z.imag)


def line(first, *steps):
    """
    Return an SVG "d" specifier for the closed path starting at first and
    moving by each of the relative steps in turn.
    """
    points = ' '.join('l{},{}'.format(p.real, p.imag) for p in steps)
    return 'm{},{} {}z'.format(first.real, first.imag, points)


def arc(start, r, end):
    """
    Return an SVG "d" specifier for the minor circular arc of radius r from
    start to end, drawn in the negative-angle sense.
    """
    return 'M {} {} A {} {} 0 0 0 {} {}'.format(
        start.real, start.imag, r, r, end.real, end.imag)
