"""
Errors raised by the geocalc solvers. Each outcome a caller may need to tell
apart has its own class; all of them derive from GeocalcError.
"""

__all__ = [
    'BearingOutOfRange', 'BearingUndefined', 'CoordinateOutOfRange',
    'GeocalcError', 'InvalidSamplingArguments', 'NonConvergence',
]


class GeocalcError(Exception):
    """Base class for geocalc errors"""


class CoordinateOutOfRange(GeocalcError, ValueError):
    """Latitude outside [-90, 90] or longitude outside [-180, 180]"""


class BearingOutOfRange(GeocalcError, ValueError):
    """Bearing outside [0, 360]"""


class BearingUndefined(GeocalcError):
    """
    No unique initial course exists between the points: they are antipodal,
    coincident, share a pole, or the ellipsoidal solution did not converge.
    """


class NonConvergence(GeocalcError, ArithmeticError):
    """The ellipsoidal iteration exhausted its cap without converging"""

    def __init__(self, message: str = 'Formula did not converge'):
        super().__init__(message)


class InvalidSamplingArguments(GeocalcError, ValueError):
    """Negative minimum or maximum sampling distance"""
