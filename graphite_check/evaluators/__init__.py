"""
Evaluation stages for graphite-check.
"""

from graphite_check.evaluators.staleness import StalenessGuard
from graphite_check.evaluators.threshold import ThresholdEvaluator
from graphite_check.evaluators.trend import TrendSuppressor

__all__ = ["StalenessGuard", "ThresholdEvaluator", "TrendSuppressor"]
