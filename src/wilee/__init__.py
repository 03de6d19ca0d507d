"""
Wilee
=====
Low-level numeric primitives for scientific computing: tolerance-based
comparison of floating-point values, a 2D point and a sampled univariate
function with interval lookup.

Applications configure logging through `wilee.logging_config.setup_logging`.
"""
import logging

from wilee.core.approx import approx, approx_equal, approx_equal_sequence
from wilee.core.point import Point2D
from wilee.core.sampled_function import SampledFunction
from wilee.errors import InvalidArgumentError, UndefinedOrderingError, WileeError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "approx",
    "approx_equal",
    "approx_equal_sequence",
    "Point2D",
    "SampledFunction",
    "WileeError",
    "InvalidArgumentError",
    "UndefinedOrderingError",
]

__version__ = "0.1.0"
