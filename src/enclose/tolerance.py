"""
Floating point comparisons with a fixed absolute tolerance.

Every geometric decision (inside or outside a disc, turn classification) goes
through these comparisons so that round-off from distances and determinants
does not flip the outcome.

Note:
    The tolerance is absolute. It assumes coordinates of moderate magnitude
    (say screen pixels or unit-scale data). Very large or very small
    coordinates are not handled and this is a known limitation.
"""
import numpy

EPS = 1e-5


def tolerably_equal(a, b):
    """True if ``|a - b| <= EPS``."""
    return abs(a - b) <= EPS


def less_or_tolerably_equal(a, b):
    """True if ``a < b`` or ``a`` and ``b`` are tolerably equal."""
    return a < b or tolerably_equal(a, b)


# Vectorized versions, used to check many points against one disc.
def tolerably_equal_array(a, b):
    return numpy.abs(numpy.asarray(a) - numpy.asarray(b)) <= EPS


def less_or_tolerably_equal_array(a, b):
    a = numpy.asarray(a)
    b = numpy.asarray(b)
    return (a < b) | tolerably_equal_array(a, b)
