"""
graphite-check - A threshold check for Graphite metrics.

This package fetches a recent window of datapoints for a single Graphite
target, applies staleness, threshold and reset-on-change rules, and reports
one check outcome (ok, warning, critical or unknown).
"""

__version__ = "0.1.0"
