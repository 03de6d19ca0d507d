"""Shared fixtures for the wilee test suite."""

from __future__ import annotations

import pytest

from wilee import SampledFunction


@pytest.fixture
def unsorted_function() -> SampledFunction:
    """Three samples of x**2 given out of order."""
    return SampledFunction([0.0, 2.0, 1.0], [0.0, 4.0, 1.0])


@pytest.fixture
def square_function() -> SampledFunction:
    """Four samples of x**2 on [0, 3]."""
    return SampledFunction([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
