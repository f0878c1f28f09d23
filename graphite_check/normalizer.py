"""
Turns raw Graphite datapoints into an evaluable Series.
"""

import math
from collections.abc import Sequence

from graphite_check.core import Datapoint, Series, TransportError
from graphite_check.logging_config import get_logger
from graphite_check.observers.graphite import NO_DATA

logger = get_logger(__name__)

MISSING_VALUE = 0.0


def normalize(datapoints: Sequence[Datapoint]) -> Series:
    """
    Clean datapoints and derive the series timing.

    Graphite often returns an incomplete trailing bucket, so a final datapoint
    without a value is dropped. Any other missing value becomes 0.0.

    Raises:
        TransportError: If no datapoints remain
    """
    points = list(datapoints)
    if points and points[-1].value is None:
        logger.debug("Dropping trailing empty datapoint at %s", points[-1].timestamp)
        points.pop()

    if not points:
        raise TransportError(NO_DATA)

    values = tuple(MISSING_VALUE if p.value is None else p.value for p in points)
    start_time = points[0].timestamp
    end_time = points[-1].timestamp
    if end_time < start_time:
        logger.error("Datapoints out of order: first %s, last %s", start_time, end_time)
        raise TransportError(NO_DATA)

    return Series(
        datapoints=tuple(points),
        values=values,
        start_time=start_time,
        end_time=end_time,
        step=math.ceil((end_time - start_time) / len(points))
    )
