import random

import pytest

from enclose.primitives import Point


@pytest.fixture
def rng():
    return random.Random(20140101)


@pytest.fixture
def triangle():
    return [Point(0., 0.), Point(4., 0.), Point(0., 4.)]


@pytest.fixture
def with_interior():
    # (1, 0.3) is strictly inside the triangle of the others
    return [Point(0., 0.), Point(2., 0.), Point(1., 1.), Point(1., 0.3)]


@pytest.fixture
def square():
    return [Point(0., 0.), Point(2., 0.), Point(2., 2.), Point(0., 2.)]


def random_cloud(seed, n, scale=10.):
    gen = random.Random(seed)
    return [Point(gen.uniform(0., scale), gen.uniform(0., scale))
            for _ in range(n)]


@pytest.fixture(params=[(1, 3), (2, 5), (3, 10), (4, 25), (5, 100),
                        (6, 300)],
                ids=lambda p: "seed{}-n{}".format(*p))
def cloud(request):
    return random_cloud(*request.param)
