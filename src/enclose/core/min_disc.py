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
Minimum enclosing disc.

Randomized incremental construction: points are added in random order and the
disc is only recomputed when a point falls outside of it. Such a point must
lie on the boundary of the new disc, which turns the recomputation into the
same problem with one more known boundary point. Three levels are needed:
no boundary point known, one known, two known.

Runs in expected O(n) time. The random order is the only source of
non-determinism; pass a seeded ``random.Random`` as `rng` to reproduce a run.
The disc itself is unique, so results agree in value across runs up to
floating round-off.
'''
from enclose.core.enclosing_geometry import (point_in_disc, three_point_disc,
                                             two_point_disc)
from enclose.logging import geometry_logger
from enclose.primitives import random_permutation


# Initially: No boundary points known
def minimum_disc(points, rng=None):
    """
    Smallest disc containing all of `points`.

    Args:
        points (sequence of Point): the point set. Not modified.
        rng (random.Random, optional): source of randomness for the
            permutation. Defaults to the ``random`` module.

    Returns:
        Circle, or None if fewer than 2 points are given.
    """
    if points is None or len(points) < 2:
        return None
    shuffled = random_permutation(points, rng=rng)

    # Progressively add points to the disc or recompute it
    disc = two_point_disc(shuffled[0], shuffled[1])
    for i in range(2, len(shuffled)):
        if not point_in_disc(shuffled[i], disc):
            disc = minimum_disc_with_point(shuffled[:i], shuffled[i])
    geometry_logger.debug("Minimum disc of %d points: %r", len(points), disc)
    return disc


# One boundary point known
def minimum_disc_with_point(points, p):
    """
    Smallest disc containing `points` with `p` on its boundary.

    `points` must not be empty.
    """
    disc = two_point_disc(points[0], p)
    for i in range(1, len(points)):
        if not point_in_disc(points[i], disc):
            disc = minimum_disc_with_2_points(points[:i], points[i], p)
    return disc


# Two boundary points known
def minimum_disc_with_2_points(points, p, q):
    """Smallest disc containing `points` with `p` and `q` on its boundary."""
    disc = two_point_disc(p, q)
    for point in points:
        if not point_in_disc(point, disc):
            disc = three_point_disc(point, p, q)
    return disc
