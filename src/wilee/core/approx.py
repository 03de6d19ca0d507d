"""
Approximate Equality
====================
Tolerance-based comparison of floating-point values.

The error between a value and its reference is relative to the magnitude of
the reference, except when the reference is exactly zero, where the absolute
error is used. Two values are approximately equal when that error is strictly
lower than the precision.
"""
from __future__ import annotations

from typing import Any, Iterable, Sized, TypeVar

import numpy as np

from wilee.config import DEFAULT_PRECISION

T = TypeVar("T", float, np.floating)


def approx_equal(value: T, reference: T, precision: T = DEFAULT_PRECISION) -> bool:
    """
    Compare a scalar against a reference.

    Arithmetic is carried out in the operands' own type, so numpy float32
    inputs are compared with 32-bit precision.

    Args:
        value: Value to test.
        reference: Expected value.
        precision: Relative tolerance (absolute when `reference` is zero).

    Returns:
        True if the error is strictly lower than `precision`. NaN on either
        side gives False.
    """
    error = abs(value - reference)

    if reference != 0:
        error = error / abs(reference)

    return bool(error < precision)


def approx_equal_sequence(
    values: Iterable[T],
    references: Iterable[T],
    precision: T = DEFAULT_PRECISION,
) -> bool:
    """
    Compare two sequences element by element.

    Only the overlapping prefix is compared; the number of matching pairs has
    to reach the length of the longer sequence, so sequences of different
    lengths are never approximately equal.

    Args:
        values: Values to test.
        references: Expected values.
        precision: Relative tolerance applied to every pair.

    Returns:
        True if every aligned pair is approximately equal and the lengths match.
    """
    values = _as_sized(values)
    references = _as_sized(references)

    count_of_true = sum(
        1 for value, reference in zip(values, references)
        if approx_equal(value, reference, precision)
    )

    return count_of_true == max(len(values), len(references))


def approx(value: Any, reference: Any, precision: Any = DEFAULT_PRECISION) -> bool:
    """
    Compare scalars or sequences, depending on the type of `value`.
    """
    if _is_sequence(value):
        return approx_equal_sequence(value, reference, precision)
    return approx_equal(value, reference, precision)


def _is_sequence(obj: Any) -> bool:
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    return isinstance(obj, (list, tuple))


def _as_sized(obj: Iterable[T]) -> Sized:
    if isinstance(obj, (list, tuple, np.ndarray)):
        return obj
    return list(obj)
