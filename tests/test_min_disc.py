import itertools
import math
import random

import numpy
import pytest

from enclose.core.enclosing_geometry import three_point_disc, two_point_disc
from enclose.core.min_disc import (minimum_disc, minimum_disc_with_2_points,
                                   minimum_disc_with_point)
from enclose.predicates import is_collinear
from enclose.primitives import Point
from enclose.tolerance import EPS

from conftest import random_cloud


def brute_force_radius(points):
    """Smallest candidate disc over all pairs and triples: O(n^4)."""
    arr = numpy.array(points)
    best = math.inf
    candidates = [two_point_disc(p, q)
                  for p, q in itertools.combinations(points, 2)]
    candidates.extend(three_point_disc(p, q, r)
                      for p, q, r in itertools.combinations(points, 3)
                      if not is_collinear(p, q, r))
    for disc in candidates:
        dists = numpy.hypot(arr[:, 0] - disc.center.x,
                            arr[:, 1] - disc.center.y)
        if (dists <= disc.radius + 1e-9).all():
            best = min(best, disc.radius)
    return best


@pytest.mark.parametrize("points", [None, [], [Point(1., 1.)]])
def test_too_few_points(points, rng):
    assert minimum_disc(points, rng=rng) is None


def test_two_points(rng):
    disc = minimum_disc([Point(0., 0.), Point(0., 6.)], rng=rng)
    assert disc.center == Point(0., 3.)
    assert disc.radius == 3.


def test_right_triangle(triangle, rng):
    disc = minimum_disc(triangle, rng=rng)
    assert tuple(disc.center) == pytest.approx((2., 2.))
    assert disc.radius == pytest.approx(2 * math.sqrt(2))


def test_interior_point(with_interior, rng):
    disc = minimum_disc(with_interior, rng=rng)
    assert tuple(disc.center) == pytest.approx((1., 0.))
    assert disc.radius == pytest.approx(1.)
    inner = Point(1., 0.3)
    assert math.hypot(inner.x - disc.center.x,
                      inner.y - disc.center.y) < disc.radius - EPS


def test_square(square, rng):
    disc = minimum_disc(square, rng=rng)
    assert tuple(disc.center) == pytest.approx((1., 1.))
    assert disc.radius == pytest.approx(math.sqrt(2))


def test_obtuse_triangle_uses_the_long_side(rng):
    # The circumcircle is not minimal for an obtuse triangle
    points = [Point(0., 0.), Point(10., 0.), Point(5., 1.)]
    disc = minimum_disc(points, rng=rng)
    assert tuple(disc.center) == pytest.approx((5., 0.))
    assert disc.radius == pytest.approx(5.)


def test_repeated_point(rng):
    disc = minimum_disc([Point(1., 1.)] * 5, rng=rng)
    assert disc.center == Point(1., 1.)
    assert disc.radius == 0.


def test_duplicates(rng):
    points = [Point(0., 0.)] * 3 + [Point(2., 0.), Point(2., 0.)]
    disc = minimum_disc(points, rng=rng)
    assert tuple(disc.center) == pytest.approx((1., 0.))
    assert disc.radius == pytest.approx(1.)


@pytest.mark.parametrize("seed", range(10))
def test_collinear_points(seed):
    points = [Point(float(i), 2. * i) for i in range(7)]
    disc = minimum_disc(points, rng=random.Random(seed))
    assert tuple(disc.center) == pytest.approx((3., 6.))
    assert disc.radius == pytest.approx(math.hypot(3., 6.))


def test_contains_every_point(cloud, rng):
    disc = minimum_disc(cloud, rng=rng)
    assert disc.contains_all(cloud)


def test_input_is_not_modified(cloud, rng):
    before = list(cloud)
    minimum_disc(cloud, rng=rng)
    assert cloud == before


@pytest.mark.parametrize("seed", range(12))
def test_minimality(seed):
    points = random_cloud(seed, n=3 + seed)
    disc = minimum_disc(points, rng=random.Random(seed))
    assert disc.radius == pytest.approx(brute_force_radius(points), abs=1e-4)


def test_same_rng_seed_same_disc(cloud):
    assert (minimum_disc(cloud, rng=random.Random(3))
            == minimum_disc(cloud, rng=random.Random(3)))


def test_independent_of_the_random_order(cloud):
    first = minimum_disc(cloud, rng=random.Random(1))
    second = minimum_disc(cloud, rng=random.Random(2))
    assert tuple(second.center) == pytest.approx(tuple(first.center),
                                                 abs=EPS)
    assert second.radius == pytest.approx(first.radius, abs=EPS)


def test_with_point_keeps_the_point_on_the_boundary():
    points = [Point(0., 0.), Point(1., 0.)]
    p = Point(4., 0.)
    disc = minimum_disc_with_point(points, p)
    assert tuple(disc.center) == pytest.approx((2., 0.))
    assert disc.radius == pytest.approx(2.)


def test_with_2_points_keeps_both_on_the_boundary():
    p, q = Point(-1., 0.), Point(1., 0.)
    # (0, 0.5) fits in the diameter disc, (0, 3) does not
    disc = minimum_disc_with_2_points([Point(0., 0.5), Point(0., 3.)], p, q)
    for point in (p, q, Point(0., 3.)):
        assert math.hypot(point.x - disc.center.x,
                          point.y - disc.center.y) == pytest.approx(
                              disc.radius)
    assert tuple(disc.center) == pytest.approx((0., 4. / 3.))


def test_with_2_points_seed_is_the_diameter_disc():
    p, q = Point(-1., 0.), Point(1., 0.)
    disc = minimum_disc_with_2_points([Point(0., 0.5)], p, q)
    assert disc == two_point_disc(p, q)


@pytest.mark.parametrize("seed", range(5))
def test_small_triangle(seed):
    side = 0.002
    points = [Point(0., 0.), Point(side, 0.),
              Point(side / 2, side * math.sqrt(3) / 2)]
    disc = minimum_disc(points, rng=random.Random(seed))
    assert disc.radius == pytest.approx(side / math.sqrt(3))
    assert disc.contains_all(points)
