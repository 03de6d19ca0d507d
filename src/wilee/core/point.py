"""
Two-dimensional point.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

T = TypeVar("T")


@dataclass(frozen=True)
class Point2D(Generic[T]):
    """
    An immutable point in 2D space.

    `x` and `y` are the first and second coordinates. They are stored as
    given, without validation, so NaN or infinity are accepted.
    """
    x: T
    y: T

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def to_array(self) -> npt.NDArray:
        return np.array([self.x, self.y])
