"""
Minimum enclosing disc and convex hull of planar point sets.

Both constructs are recomputed from scratch on every call; there is no
incremental update of a previous result.

The minimum enclosing disc is built by randomized incremental construction:
points are inserted in random order and the disc is recomputed only when a
point falls outside of it. This runs in expected linear time. The convex hull
is built with Andrew's monotone chain, two scans over the points sorted by
coordinates.

Numerics are plain floating point. Geometric decisions are made up to a fixed
absolute tolerance, :data:`enclose.tolerance.EPS`.
"""
from .api import compute_convex_hull, compute_minimum_enclosing_disc  # noqa: F401
from .core.enclosing_geometry import Circle, Hull  # noqa: F401
from .errors import EncloseError, InvalidPointError  # noqa: F401
from .logging import config_logging, set_up_simple_logging  # noqa: F401
from .predicates import TurnDirection, turn_direction  # noqa: F401
from .primitives import Point  # noqa: F401
from .session import Algorithm, Session  # noqa: F401
from .tolerance import EPS  # noqa: F401

__version__ = "0.1.0"
