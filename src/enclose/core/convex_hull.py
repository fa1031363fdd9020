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
Convex hull by Andrew's monotone chain.

Points are sorted by (x, y) and scanned twice, once in each direction. Each
scan keeps a chain that only turns right; together the two chains make up the
boundary. Sorting dominates: O(n log n).

Ties and degeneracies are settled by :func:`enclose.predicates.turn_direction`:
a (tolerably) flat turn counts as NONE and its middle point is dropped, so
collinear boundary points are not hull vertices.
'''
from enclose.core.enclosing_geometry import Hull
from enclose.logging import geometry_logger
from enclose.predicates import TurnDirection, turn_direction
from enclose.primitives import lexicographic_order


def half_convex_hull(points):
    """
    Right-turning chain over `points`, taken in the given order.

    Args:
        points (sequence of Point): at least 2 points, sorted.

    Returns:
        list of Point: the chain, from ``points[0]`` to ``points[-1]``.
    """
    chain = [points[0], points[1]]
    for point in points[2:]:
        chain.append(point)
        # Remove the middle of the last 3 points until they turn right
        while (len(chain) > 2 and
               turn_direction(*chain[-3:]) is not TurnDirection.RIGHT):
            del chain[-2]
    return chain


def convex_hull(points):
    """
    Convex hull of `points`.

    Args:
        points (sequence of Point): the point set. Not modified.

    Returns:
        Hull, or None if fewer than 3 distinct points are given. The
        vertices run counter-clockwise on a y-up frame, starting from the
        leftmost (then lowest) point; the first vertex is not repeated at the
        end. Collinear points give a degenerate hull of 2 vertices.
    """
    if points is None or len(set(points)) < 3:
        return None
    ordered = lexicographic_order(points)
    # "upper" and "lower" as seen on a y-down screen
    upper = half_convex_hull(ordered)
    lower = half_convex_hull(ordered[::-1])
    # The lower chain starts at the last vertex of the upper chain and ends
    # at its first: both ends are dropped.
    hull = Hull(upper + lower[1:-1])
    geometry_logger.debug("Convex hull of %d points has %d vertices.",
                          len(points), len(hull))
    return hull
