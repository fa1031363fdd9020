# Copyright (C) 2018 DataStorm
#
# This file is part of SpatialIndex.
#
# SpatialIndex is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# SpatialIndex is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
'''
Enclosing geometry classes and their elementary constructions.

An enclosing geometry is a shape containing entirely a given set of points.
Two are provided: the disc (:class:`Circle`) and the convex polygon
(:class:`Hull`). Both are immutable values, produced by the engines in
:mod:`enclose.core.min_disc` and :mod:`enclose.core.convex_hull`.

The circle constructions below are the building blocks of the minimum
enclosing disc: the disc having two points as diameter, and the circumcircle
of three points.
'''
import abc
import collections
import collections.abc
import math

import numpy
import shapely.geometry

from enclose.logging import geometry_logger
from enclose.predicates import cross_z
from enclose.primitives import Point, as_point, as_points, distance, midpoint
from enclose.tolerance import (EPS, less_or_tolerably_equal,
                               less_or_tolerably_equal_array)


class EnclosingGeometry(abc.ABC):
    """
    Abstract interface for enclosing geometries.

    Containment tests are inclusive and tolerance-aware: a point within
    ``EPS`` of the boundary is contained.
    """
    __slots__ = ()

    @abc.abstractmethod
    def contains(self, point):
        """Returns True if `point` lies inside or (tolerably) on `self`."""
        pass

    def contains_all(self, points):
        """Returns True if every point of `points` is contained in `self`."""
        return all(self.contains(p) for p in as_points(points))

    @property
    @abc.abstractmethod
    def area(self):
        pass

    @abc.abstractmethod
    def centroid(self):
        """Returns `self`'s barycenter as a :class:`Point`."""
        pass

    @abc.abstractmethod
    def to_shapely(self):
        """Returns an equivalent shapely geometry."""
        pass


class Circle(collections.namedtuple("Circle", "center radius"),
             EnclosingGeometry):
    '''Disc given by its center Point and a non-negative radius.'''
    __slots__ = ()

    def __new__(cls, center, radius):
        radius = float(radius)
        if not radius >= 0.:
            raise ValueError(
                "Radius must be non-negative, got {}.".format(radius))
        return super(Circle, cls).__new__(cls, as_point(center), radius)

    def __repr__(self):
        return "Circle(x={}, y={}, r={})".format(
            self.center.x, self.center.y, self.radius)

    def contains(self, point):
        return point_in_disc(as_point(point), self)

    def contains_all(self, points):
        arr = numpy.array(as_points(points), dtype=float).reshape(-1, 2)
        dists = numpy.hypot(arr[:, 0] - self.center.x,
                            arr[:, 1] - self.center.y)
        return bool(less_or_tolerably_equal_array(dists, self.radius).all())

    @property
    def area(self):
        return math.pi * self.radius**2

    def centroid(self):
        return self.center

    def to_shapely(self, quad_segs=16):
        """
        Polygonal approximation of the disc.

        Args:
            quad_segs (int, optional): number of segments per quarter circle.
                Defaults to 16.
        """
        return shapely.geometry.Point(self.center).buffer(
            self.radius, quad_segs=quad_segs)


class Hull(collections.abc.Sequence, EnclosingGeometry):
    '''
    Convex polygon given by its ordered boundary vertices.

    The vertex sequence is open: the closing edge goes from the last vertex
    back to the first, which is not repeated. A hull of collinear points
    degenerates to the two extreme points.
    '''
    __slots__ = ('_vertices',)

    def __init__(self, vertices):
        self._vertices = tuple(as_points(vertices))

    def __repr__(self):
        return "Hull({})".format(list(self._vertices))

    def __getitem__(self, idx):
        return self._vertices[idx]

    def __len__(self):
        return len(self._vertices)

    def __eq__(self, other):
        if isinstance(other, collections.abc.Sequence):
            return self._vertices == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(self._vertices)

    @property
    def vertices(self):
        return self._vertices

    def edges(self):
        """Yields the (start, end) pairs of the boundary, closing edge last."""
        n = len(self._vertices)
        for i in range(n):
            yield self._vertices[i], self._vertices[(i + 1) % n]

    @property
    def is_degenerate(self):
        """True when the hull has no interior (collinear input)."""
        return (len(self._vertices) < 3 or
                _is_flat(2. * self.area, self._vertices))

    @property
    def area(self):
        # Shoelace formula
        return abs(sum(a.x * b.y - b.x * a.y for a, b in self.edges())) / 2.

    def contains(self, point):
        point = as_point(point)
        if len(self._vertices) < 3:
            return less_or_tolerably_equal(
                _distance_to_segment(point, self._vertices[0],
                                     self._vertices[-1]),
                0.)
        # The boundary runs counter-clockwise (y-up), so interior points lie
        # on the left of every edge: signed distances must not go below -EPS.
        for a, b in self.edges():
            length = distance(a, b)
            if length == 0.:
                continue
            if not less_or_tolerably_equal(0., cross_z(b, a, point) / length):
                return False
        return True

    def centroid(self):
        return as_point(self.to_shapely().centroid)

    def to_shapely(self):
        """
        Returns a shapely Polygon, or a LineString for a degenerate hull.
        """
        if self.is_degenerate:
            return shapely.geometry.LineString(self._vertices)
        return shapely.geometry.Polygon(self._vertices)


def _is_flat(twice_area, vertices):
    # Twice the area grows with the square of the coordinates: it is compared
    # to the squared longest edge, not to EPS alone.
    n = len(vertices)
    longest = max(distance(vertices[i], vertices[(i + 1) % n])
                  for i in range(n))
    return abs(twice_area) <= EPS * longest ** 2


def _distance_to_segment(p, a, b):
    length_sq = (b.x - a.x)**2 + (b.y - a.y)**2
    if length_sq == 0.:
        return distance(p, a)
    t = ((p.x - a.x) * (b.x - a.x) + (p.y - a.y) * (b.y - a.y)) / length_sq
    t = min(1., max(0., t))
    return distance(p, Point(a.x + t * (b.x - a.x), a.y + t * (b.y - a.y)))


# ====================  Circle constructions  =================================

def two_point_disc(p, q):
    """Smallest disc through `p` and `q`: the one having them as diameter."""
    center = midpoint(p, q)
    return Circle(center, distance(center, p))


def three_point_disc(p, q, r):
    """
    Circumcircle of the triangle `p`, `q`, `r`.

    Mathematical algorithm from Wikipedia: Circumscribed circle, Cartesian
    coordinates. Coordinates are first translated to the center of the
    bounding box to limit cancellation.

    Collinear triples have no circumcircle (the determinant vanishes). A
    triple is taken as collinear when twice its area is within EPS times the
    squared longest side, whatever the scale of the coordinates. Such
    triples are read as two effectively distinct boundary points and the
    disc having
    the farthest pair as diameter is returned instead, which contains all
    three points.
    """
    ox = (min(p.x, q.x, r.x) + max(p.x, q.x, r.x)) / 2.0
    oy = (min(p.y, q.y, r.y) + max(p.y, q.y, r.y)) / 2.0
    ax, ay = p.x - ox, p.y - oy
    bx, by = q.x - ox, q.y - oy
    cx, cy = r.x - ox, r.y - oy
    d = (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by)) * 2.0
    # d is four times the signed area of the triangle
    if _is_flat(d / 2.0, (p, q, r)):
        geometry_logger.debug(
            "Collinear triple %s, %s, %s: falling back to a two-point disc.",
            p, q, r)
        return _farthest_pair_disc(p, q, r)
    a2 = ax * ax + ay * ay
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    x = ox + (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
    y = oy + (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
    center = Point(x, y)
    return Circle(center, distance(center, p))


def _farthest_pair_disc(p, q, r):
    pair = max([(p, q), (p, r), (q, r)], key=lambda pq: distance(*pq))
    return two_point_disc(*pair)


def point_in_disc(p, circle):
    """True if `p` is inside `circle`, its boundary counting up to EPS."""
    return less_or_tolerably_equal(distance(circle.center, p), circle.radius)
