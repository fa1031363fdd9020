"""
Points and the elementary operations on them.

Data conventions:
    A point is a :class:`Point`, an immutable pair of floats (x, y).
    Anything that looks like a pair of reals (tuple, list, numpy row, shapely
    Point) is accepted at the boundary and coerced with :func:`as_point`.
"""
import collections
import math
import random

import numpy

from .errors import InvalidPointError


Point = collections.namedtuple("Point", "x y")
# Equality is exact. Tolerance only enters derived comparisons.


def as_point(obj):
    """
    Coerce `obj` into a :class:`Point`.

    Args:
        obj: a Point, a pair of reals, a numpy array of shape (2,) or a
            shapely Point.

    Raises:
        InvalidPointError: if `obj` is not a pair of finite reals.
    """
    if isinstance(obj, Point):
        return obj
    # shapely points expose a coordinate sequence of length one.
    if hasattr(obj, "coords"):
        coords = list(obj.coords)
        if len(coords) != 1:
            raise InvalidPointError(
                "Expected a single coordinate, got {}.".format(len(coords)))
        obj = coords[0]
    try:
        arr = numpy.asarray(obj, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidPointError(
            "Cannot read {!r} as a point.".format(obj)) from exc
    if arr.shape != (2,):
        raise InvalidPointError(
            "A point must have exactly 2 coordinates, got shape {}."
            .format(arr.shape))
    if not numpy.isfinite(arr).all():
        raise InvalidPointError(
            "Point coordinates must be finite, got {!r}.".format(obj))
    return Point(float(arr[0]), float(arr[1]))


def as_points(objs):
    """
    Coerce a collection of points into a list of :class:`Point`.

    `objs` can be any iterable of point-like objects, a (n, 2) numpy array,
    or a shapely geometry: the vertices of a LineString, the members of a
    MultiPoint, the exterior ring of a Polygon (without its closing vertex).
    ``None`` is read as an empty collection.
    """
    if objs is None:
        return []
    # Checked in this order: multi-part shapely geometries raise on .coords
    if hasattr(objs, "exterior"):
        objs = list(objs.exterior.coords)[:-1]
    elif hasattr(objs, "geoms"):
        objs = list(objs.geoms)
    elif hasattr(objs, "coords"):
        objs = list(objs.coords)
    return [as_point(obj) for obj in objs]


def distance(p, q):
    """Euclidean distance between points `p` and `q`."""
    dx = p[0] - q[0]
    dy = p[1] - q[1]
    return math.sqrt(dx * dx + dy * dy)


def midpoint(p, q):
    return Point((p[0] + q[0]) / 2.0, (p[1] + q[1]) / 2.0)


def lexicographic_order(points):
    """
    Returns a new list with `points` sorted by x, then y, ascending.

    The sort is stable and `points` itself is left untouched.
    """
    return sorted(points, key=lambda p: (p[0], p[1]))


def random_permutation(points, rng=None):
    """
    Fisher-Yates shuffle of a copy of `points`.

    Args:
        points (sequence): elements to permute.
        rng (random.Random, optional): source of randomness. Anything with a
            ``randrange`` method works. Defaults to the ``random`` module, so
            seeding it (or passing a seeded ``random.Random``) makes the draw
            reproducible.

    Returns:
        list: the permuted copy.
    """
    rng = random if rng is None else rng
    shuffled = list(points)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
