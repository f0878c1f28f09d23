"""
Reset-on-change suppression for graphite-check.
"""

from collections.abc import Sequence

from graphite_check.comparators import Comparator
from graphite_check.logging_config import get_logger

logger = get_logger(__name__)


class TrendSuppressor:
    """
    Holds back an alert while the metric is already recovering.

    The trailing `window` values are walked from the oldest one, discarding
    each value for as long as it is past the next value in the comparator's
    direction. If the walk consumes the whole window, every step moved away
    from the alerting side and the alert is suppressed.

    With the gt comparator (high is bad) a steadily falling window suppresses;
    with lt (low is bad) a steadily rising one does.

    Config:
        window: Number of trailing samples to inspect (None disables suppression)
        comparator: Direction of the threshold being guarded
    """

    def __init__(self, window: int | None, comparator: Comparator):
        self.window = window
        self.comparator = comparator

    def suppresses(self, values: Sequence[float]) -> bool:
        """Return True if the trailing window shows a sustained recovery."""
        if not self.window:
            return False

        remaining = list(values[-self.window:])
        if len(remaining) < 2:
            # A single sample has no trend
            return False

        while len(remaining) > 1 and self.comparator(remaining[0], remaining[1]):
            remaining.pop(0)
        # The newest sample is consumed once every earlier step held
        if len(remaining) == 1:
            remaining.pop()

        recovering = not remaining
        if recovering:
            logger.info(
                "Last %s value(s) show a steady recovery (comparator %s), suppressing alert",
                self.window,
                self.comparator.value
            )
        return recovering


__all__ = ["TrendSuppressor"]
