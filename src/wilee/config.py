"""
Numeric Constants
=================
Central registry for the package-wide numeric defaults.

Exports:
    DEFAULT_PRECISION (float): Relative tolerance used by the approximate
        equality helpers when no precision is given.
"""

DEFAULT_PRECISION: float = 0.01
