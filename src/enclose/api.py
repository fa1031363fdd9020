"""
Entry points of the library.

Both functions take an ordered collection of 2D points (see
:func:`enclose.primitives.as_points` for the accepted forms), perform no I/O
and keep no state between calls. Too small inputs give ``None``.
"""
from .core import convex_hull, min_disc
from .primitives import as_points


def compute_minimum_enclosing_disc(points, rng=None):
    """
    Smallest disc containing every point.

    Args:
        points: collection of 2D points.
        rng (random.Random, optional): source of randomness for the
            incremental construction.

    Returns:
        Circle, or None for fewer than 2 points.
    """
    return min_disc.minimum_disc(as_points(points), rng=rng)


def compute_convex_hull(points):
    """
    Smallest convex polygon containing every point.

    Returns:
        Hull, or None for fewer than 3 distinct points.
    """
    return convex_hull.convex_hull(as_points(points))
