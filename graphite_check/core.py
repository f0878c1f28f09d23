"""
Core data structures for graphite-check.

The check is a linear pipeline:
- Fetch: read datapoints for one target from Graphite
- Normalize: trim and clean the datapoints into a Series
- Guard: reject stale data
- Evaluate: compare the latest value against critical/warning thresholds

Every stage either hands its result to the next one or raises a CheckError,
which maps onto exactly one Outcome.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Datapoint:
    """One sample returned by Graphite."""
    value: float | None  # None when the bucket had no data
    timestamp: int  # Epoch seconds


@dataclass(frozen=True)
class Series:
    """Normalized datapoints for one evaluation run."""
    datapoints: tuple[Datapoint, ...]
    values: tuple[float, ...]  # Same length as datapoints, None replaced by 0.0
    start_time: int
    end_time: int
    step: int

    @property
    def latest(self) -> float:
        """Most recent value in the series."""
        return self.values[-1]


class OutcomeKind(Enum):
    """Check result kinds with their conventional exit codes."""
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def exit_code(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Outcome:
    """The single result reported by a check run."""
    kind: OutcomeKind
    message: str

    def render(self, check_name: str) -> str:
        """Format the result line printed by the CLI."""
        return f"{check_name} {self.kind.name}: {self.message}"


class CheckError(Exception):
    """
    Base class for failures that end a check run.

    Subclasses fix the outcome kind the failure is reported as.
    """

    kind = OutcomeKind.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_outcome(self) -> Outcome:
        """Convert the failure into the outcome reported to the user."""
        return Outcome(kind=self.kind, message=self.message)


class ConfigError(CheckError):
    """Missing or invalid configuration, detected before any I/O."""
    kind = OutcomeKind.UNKNOWN


class TransportError(CheckError):
    """Graphite is unreachable or returned no usable data."""
    kind = OutcomeKind.CRITICAL


class StalenessError(CheckError):
    """The newest datapoint is older than the allowed age."""
    kind = OutcomeKind.CRITICAL
