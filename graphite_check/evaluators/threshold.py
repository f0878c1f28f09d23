"""
Threshold evaluator for graphite-check.
"""

from graphite_check.config import CheckConfig
from graphite_check.core import Outcome, OutcomeKind, Series
from graphite_check.evaluators.trend import TrendSuppressor
from graphite_check.logging_config import get_logger

logger = get_logger(__name__)


def format_values(values: tuple[float, ...]) -> str:
    """Render values as "[v1, v2, ...]"."""
    return "[%s]" % ", ".join(str(value) for value in values)


class ThresholdEvaluator:
    """
    Alerts when the latest value is past a threshold.

    The critical threshold is checked before the warning threshold; the first
    one that fires wins.

    Config:
        critical: Critical threshold (optional)
        warning: Warning threshold (optional)
        comparator: "gt" (alert above) or "lt" (alert below)
    """

    def __init__(self, config: CheckConfig, suppressor: TrendSuppressor | None = None):
        self.config = config
        self.suppressor = suppressor or TrendSuppressor(
            config.reset_on_change,
            config.comparator
        )

    def evaluate(self, series: Series, name: str) -> Outcome | None:
        """
        Return the critical or warning outcome, or None if neither fires.
        """
        levels = (
            (OutcomeKind.CRITICAL, self.config.critical),
            (OutcomeKind.WARNING, self.config.warning),
        )
        for kind, threshold in levels:
            if threshold is None:
                continue
            if self.breached(series, threshold):
                return Outcome(
                    kind=kind,
                    message=(
                        f"{name} has passed {kind.label} threshold. "
                        f"Values: {format_values(series.values)}."
                    )
                )
        return None

    def breached(self, series: Series, threshold: float) -> bool:
        """True if the latest value is past threshold and no recovery is under way."""
        crossed = self.config.comparator(series.latest, threshold)
        logger.debug(
            "Latest %s %s %s: %s",
            series.latest,
            self.config.comparator.value,
            threshold,
            crossed
        )
        return crossed and not self.suppressor.suppresses(series.values)


__all__ = ["ThresholdEvaluator", "format_values"]
