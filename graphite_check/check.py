"""
The graphite data check pipeline.
"""

import time
from collections.abc import Callable

from graphite_check.config import CheckConfig
from graphite_check.core import CheckError, Outcome, OutcomeKind
from graphite_check.evaluators import StalenessGuard, ThresholdEvaluator
from graphite_check.logging_config import get_logger
from graphite_check.normalizer import normalize
from graphite_check.observers import SeriesFetcher

logger = get_logger(__name__)


class GraphiteDataCheck:
    """
    Runs one evaluation: config -> fetch -> normalize -> age -> critical -> warning -> ok.

    Every stage can end the run early by raising a CheckError; the error is
    reported as the run's only outcome.
    """

    def __init__(
        self,
        config: CheckConfig,
        fetcher: SeriesFetcher | None = None,
        clock: Callable[[], float] = time.time
    ):
        """
        Initialize the check.

        Args:
            config: Validated check configuration
            fetcher: Series source (defaults to a SeriesFetcher for config)
            clock: Returns the current epoch time, used for the age check
        """
        self.config = config
        self.fetcher = fetcher or SeriesFetcher(config)
        self.guard = StalenessGuard(config.allowed_age, clock=clock)
        self.evaluator = ThresholdEvaluator(config)

    @property
    def name(self) -> str:
        """Name used in messages, including the substituted hostname if any."""
        base = self.config.display_name
        if self.fetcher.formatted_host:
            return f"{base} ({self.fetcher.formatted_host})"
        return base

    def run(self) -> Outcome:
        """Evaluate the target and return exactly one outcome."""
        try:
            outcome = self._evaluate()
        except CheckError as e:
            outcome = e.to_outcome()

        logger.info("Check finished: %s", outcome.kind.label)
        return outcome

    def _evaluate(self) -> Outcome:
        self.config.require()

        series = normalize(self.fetcher.fetch())
        self.guard.check(series)

        alert = self.evaluator.evaluate(series, self.name)
        if alert is not None:
            return alert

        return Outcome(kind=OutcomeKind.OK, message=f"{self.name} value okay")
