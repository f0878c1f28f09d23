"""
Comparison direction used for thresholds and trend suppression.
"""

from enum import Enum
from typing import Any

from graphite_check.core import ConfigError

_SYMBOLS = {">": "gt", "<": "lt"}


class Comparator(Enum):
    """
    Direction of a threshold breach.

    gt: high values are bad (alert when latest > threshold)
    lt: low values are bad (alert when latest < threshold)
    """
    GREATER_THAN = "gt"
    LESS_THAN = "lt"

    def compare(self, a: float, b: float) -> bool:
        """Return True if a is past b in this comparator's direction."""
        if self is Comparator.GREATER_THAN:
            return a > b
        return a < b

    def __call__(self, a: float, b: float) -> bool:
        return self.compare(a, b)

    @classmethod
    def parse(cls, raw: Any) -> "Comparator":
        """
        Resolve a configured comparator.

        Raises:
            ConfigError: If raw is not one of gt, lt (or > / <)
        """
        if isinstance(raw, cls):
            return raw
        key = _SYMBOLS.get(raw, raw) if isinstance(raw, str) else raw
        try:
            return cls(key)
        except ValueError as e:
            raise ConfigError(
                f"Unknown comparator {raw}. Valid options: {{gt, lt}}."
            ) from e
