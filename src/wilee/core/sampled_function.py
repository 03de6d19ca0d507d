"""
Sampled Function
================
A univariate function known only through a finite set of samples.

The samples are sorted by abscissa once, at construction, and the object is
read-only afterwards. The only query is the location of the sampling interval
that brackets a given abscissa.
"""
from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Generic, Iterator, Optional, Sequence, TypeVar, Union, overload

import numpy as np

from wilee.core.point import Point2D
from wilee.errors import InvalidArgumentError, UndefinedOrderingError

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SampledFunction(Generic[T]):
    """
    1-dimensional sampled function.

    `args` holds the x-axis values and `values` the function values, both
    sorted in ascending order of `args`. Samples sharing the same abscissa
    keep the order in which they were given.
    """

    def __init__(
        self,
        args: Union[Sequence[T], npt.NDArray] = (),
        values: Union[Sequence[T], npt.NDArray] = (),
    ) -> None:
        """
        Build the function from unordered samples.

        Args:
            args: x-axis values.
            values: Function values, `values[i]` being the value at `args[i]`.

        Raises:
            InvalidArgumentError: If `args` and `values` are not one-dimensional
                or do not have the same length.
            UndefinedOrderingError: If `args` contains a value that does not
                compare equal to itself (NaN).
        """
        try:
            args_array = np.asarray(args)
            values_array = np.asarray(values)
        except ValueError as e:
            logger.warning(f"Rejected samples that do not form arrays: {e}")
            raise InvalidArgumentError(
                f"Samples must be one-dimensional sequences of scalars: {e}"
            ) from e

        if args_array.ndim != 1 or values_array.ndim != 1:
            logger.warning(
                f"Rejected samples with shapes {args_array.shape} and {values_array.shape}."
            )
            raise InvalidArgumentError(
                f"Samples must be one-dimensional, got shapes "
                f"{args_array.shape} and {values_array.shape}."
            )

        if len(args_array) != len(values_array):
            logger.warning(
                f"Rejected {len(args_array)} args for {len(values_array)} values."
            )
            raise InvalidArgumentError(
                f"'args' and 'values' must have the same length, "
                f"got {len(args_array)} and {len(values_array)}."
            )

        unordered = np.flatnonzero(args_array != args_array)
        if unordered.size:
            logger.warning(f"Rejected args with unordered values at positions {unordered.tolist()}.")
            raise UndefinedOrderingError(
                f"'args' contains values without a defined ordering at positions "
                f"{unordered.tolist()}."
            )

        self._args, self._values = self._sort_according_to_args(args_array, values_array)
        logger.debug(f"Sampled function built from {len(self._args)} samples.")

    @staticmethod
    def _sort_according_to_args(
        args: npt.NDArray,
        values: npt.NDArray,
    ) -> tuple[npt.NDArray, npt.NDArray]:
        """Sort both arrays by ascending args and freeze the result."""
        order = np.argsort(args, kind="stable")
        sorted_args = args[order]
        sorted_values = values[order]
        sorted_args.flags.writeable = False
        sorted_values.flags.writeable = False
        return sorted_args, sorted_values

    @property
    def args(self) -> npt.NDArray:
        """Sorted x-axis values (read-only)."""
        # A view of a frozen base cannot be made writeable again
        return self._args.view()

    @property
    def values(self) -> npt.NDArray:
        """Function values, aligned with `args` (read-only)."""
        return self._values.view()

    @property
    def coordinates(self) -> tuple[Point2D[T], ...]:
        """Sorted samples as points."""
        return tuple(iter(self))

    @property
    def domain(self) -> Optional[tuple[T, T]]:
        """Smallest and largest abscissa, or None for an empty function."""
        if len(self) == 0:
            return None
        return self._args[0], self._args[-1]

    def __len__(self) -> int:
        return len(self._args)

    def __iter__(self) -> Iterator[Point2D[T]]:
        for x, y in zip(self._args, self._values):
            yield Point2D(x, y)

    @overload
    def __getitem__(self, index: int) -> Point2D[T]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Point2D[T], ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Point2D[T], tuple[Point2D[T], ...]]:
        """
        Sample at `index` as a point, or a tuple of points for a slice.

        Raises:
            TypeError: If `index` is neither an integer nor a slice.
        """
        if isinstance(index, slice):
            return tuple(
                Point2D(x, y) for x, y in zip(self._args[index], self._values[index])
            )
        position = operator.index(index)
        return Point2D(self._args[position], self._values[position])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(args={self._args.tolist()}, values={self._values.tolist()})"

    def search_interval(self, x: T) -> Optional[int]:
        """
        Search the interval containing `x`.

        The returned index is such that `x` lies in [args[index], args[index + 1]).
        A query equal to a sample abscissa belongs to the interval starting at
        that sample.

        Args:
            x: Query abscissa.

        Returns:
            Index of the lower sample of the interval, or None when `x` is
            before the first sample, at or after the last one, or NaN.
        """
        if x != x:
            return None

        # Position of the first sample strictly greater than x
        position = int(np.searchsorted(self._args, x, side="right"))

        if position == 0 or position == len(self._args):
            return None
        return position - 1

    def bracket(self, x: T) -> Optional[tuple[Point2D[T], Point2D[T]]]:
        """Return the lower and upper samples of the interval containing `x`."""
        index = self.search_interval(x)
        if index is None:
            return None
        return self[index], self[index + 1]
