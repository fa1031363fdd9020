"""
Exceptions raised by enclose.

Too small inputs are not errors: the computations return ``None`` for them.
Exceptions are reserved for inputs that are not point sets at all.
"""


class EncloseError(Exception):
    """
    Generic enclose error.
    """

    pass


class InvalidPointError(EncloseError, ValueError):
    """
    Raised when an object cannot be read as a pair of finite coordinates.
    """

    pass
