"""
Exceptions raised by the wilee package.
"""


class WileeError(Exception):
    """Base class for all errors raised by wilee."""


class InvalidArgumentError(WileeError, ValueError):
    """Raised when a constructor receives inconsistent input data."""


class UndefinedOrderingError(WileeError, ValueError):
    """
    Raised when sample abscissae cannot be totally ordered.

    A NaN compares false against everything, so an ascending order of
    samples containing one is not defined.
    """
