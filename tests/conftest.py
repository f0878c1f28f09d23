"""
Pytest configuration and fixtures for graphite-check tests.
"""

from collections.abc import Callable, Sequence

import pytest

from graphite_check.core import Datapoint, Series
from graphite_check.normalizer import normalize

NOW = 1_700_000_000


@pytest.fixture
def now() -> int:
    """Fixed wall-clock time used by tests."""
    return NOW


@pytest.fixture
def make_series() -> Callable[..., Series]:
    """
    Build a normalized Series from plain values.

    Datapoints are spaced `step` seconds apart and end at `end_time`.
    """
    def factory(
        values: Sequence[float | None],
        end_time: int = NOW,
        step: int = 60
    ) -> Series:
        count = len(values)
        datapoints = [
            Datapoint(value=value, timestamp=end_time - (count - 1 - i) * step)
            for i, value in enumerate(values)
        ]
        return normalize(datapoints)

    return factory
