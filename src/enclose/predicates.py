"""
Orientation predicate for ordered triples of points.
"""
import enum

from .tolerance import tolerably_equal, less_or_tolerably_equal


class TurnDirection(enum.IntEnum):
    RIGHT = -1
    NONE = 0
    LEFT = 1


def cross_z(p1, p2, p3):
    """
    z-component of the cross product of the vectors (p2 -> p1) and (p2 -> p3).
    """
    return ((p1[0] - p2[0]) * (p3[1] - p2[1])
            - (p1[1] - p2[1]) * (p3[0] - p2[0]))


def turn_direction(p1, p2, p3):
    """
    Direction of the turn made at `p2` when walking p1 -> p2 -> p3.

    The sign of :func:`cross_z` gives the direction: positive is a left turn,
    negative a right turn, and (tolerably) zero no turn at all. Note that the
    vectors both start at `p2`, so on a y-up frame a counter-clockwise bend
    comes out as RIGHT.

    Returns:
        TurnDirection
    """
    z = cross_z(p1, p2, p3)
    # NONE must be tested first: it takes precedence on near-zero values.
    if tolerably_equal(z, 0.0):
        return TurnDirection.NONE
    elif less_or_tolerably_equal(z, 0.0):
        return TurnDirection.RIGHT
    else:
        return TurnDirection.LEFT


def is_collinear(p1, p2, p3):
    return turn_direction(p1, p2, p3) is TurnDirection.NONE
