"""
Interactive session state.

A :class:`Session` holds what an interactive front end needs between two
user actions: the current point set, the selected algorithm and the last
computed result. The geometry functions themselves stay pure; the session
only calls them with its points.
"""
import enum
import random

from .api import compute_convex_hull, compute_minimum_enclosing_disc
from .logging import session_logger
from .primitives import as_point, as_points, distance


class Algorithm(enum.Enum):
    MIN_DISC = 0
    CONVEX_HULL = 1


class Session():
    """
    Point set edited by the user, and the geometry derived from it.

    Args:
        points (optional): initial points.
        algorithm (Algorithm or int, optional): selected algorithm. Picked at
            random when None.
        pick_radius (float, optional): radius of a drawn point. A click
            closer than twice this radius to a stored point removes it.
            Defaults to 4.
        rng (random.Random, optional): source of randomness, for the
            algorithm pick and the minimum disc construction.

    Attributes:
        min_disc (Circle): last minimum enclosing disc, or None.
        convex_hull (Hull): last convex hull, or None.
    """

    def __init__(self, points=(), algorithm=None, pick_radius=4.0, rng=None):
        self._rng = random if rng is None else rng
        self._points = as_points(points)
        self.pick_radius = pick_radius
        if algorithm is None:
            algorithm = self._rng.choice(list(Algorithm))
        self._algorithm = Algorithm(algorithm)
        self.min_disc = None
        self.convex_hull = None
        self.update_derived_geometry()

    def __repr__(self):
        return "<{} algorithm={} points={}>".format(
            self.__class__.__name__, self._algorithm.name, len(self._points))

    def __len__(self):
        return len(self._points)

    @property
    def points(self):
        return tuple(self._points)

    @property
    def algorithm(self):
        return self._algorithm

    @algorithm.setter
    def algorithm(self, value):
        self._algorithm = Algorithm(value)
        self.update_derived_geometry()

    @property
    def result(self):
        """Result of the selected algorithm."""
        if self._algorithm is Algorithm.MIN_DISC:
            return self.min_disc
        return self.convex_hull

    def toggle_point(self, point):
        """
        Removes the stored point under `point`, or adds `point` if none.

        Only the first stored point within ``2 * pick_radius`` is removed.
        The derived geometry is recomputed afterwards.

        Returns:
            bool: True if `point` was added, False if a point was removed.
        """
        point = as_point(point)
        tolerance = 2 * self.pick_radius
        for i, stored in enumerate(self._points):
            if distance(stored, point) <= tolerance:
                del self._points[i]
                session_logger.debug("Removed point %s.", stored)
                added = False
                break
        else:
            self._points.append(point)
            session_logger.debug("Added point %s.", point)
            added = True
        self.update_derived_geometry()
        return added

    def clear(self):
        self._points = []
        self.update_derived_geometry()

    def update_derived_geometry(self):
        """
        Runs the selected algorithm on the current points.

        The result of the other algorithm is reset so that it is never out
        of date.
        """
        if self._algorithm is Algorithm.MIN_DISC:
            self.min_disc = compute_minimum_enclosing_disc(
                self._points, rng=self._rng)
            self.convex_hull = None
        else:
            self.convex_hull = compute_convex_hull(self._points)
            self.min_disc = None
        session_logger.debug("Updated %r.", self)
        return self.result
