"""
Staleness guard for graphite-check.
"""

import time
from collections.abc import Callable

from graphite_check.core import Series, StalenessError
from graphite_check.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_ALLOWED_AGE = 60


class StalenessGuard:
    """
    Rejects a series whose newest datapoint is too old.

    Config:
        allowed_age: Seconds the newest datapoint may lag the clock (default: 60)
        clock: Returns the current epoch time (default: time.time)
    """

    def __init__(
        self,
        allowed_age: int = DEFAULT_ALLOWED_AGE,
        clock: Callable[[], float] = time.time
    ):
        self.allowed_age = allowed_age
        self.clock = clock

    def check(self, series: Series) -> None:
        """Raise StalenessError if the series ended more than allowed_age ago."""
        age = int(self.clock()) - series.end_time
        if age > self.allowed_age:
            logger.warning("Newest datapoint is %ss old (allowed %ss)", age, self.allowed_age)
            raise StalenessError(
                f"Graphite data age is past allowed threshold ({self.allowed_age} seconds)"
            )


__all__ = ["StalenessGuard"]
