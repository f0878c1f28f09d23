"""
Data sources for graphite-check.
"""

from graphite_check.observers.graphite import SeriesFetcher, format_target, render_url

__all__ = ["SeriesFetcher", "format_target", "render_url"]
