"""
Exception types raised by the planning reports pipeline.

The pipeline is a single batch transform: every error below is fatal to the
run that raised it.  Nothing is retried.  The CLI turns these into an
``[ERROR]`` line on stderr and exit code 1.
"""

from __future__ import annotations

from pathlib import Path


class PlanningReportsError(RuntimeError):
    """Base class for all pipeline errors surfaced to the CLI."""


class ReportInputError(PlanningReportsError):
    """Raised when an input file is missing, unreadable, or not valid JSON,
    or when its contents fail schema validation.

    Attributes:
        path:   The offending input file.
        reason: Short human-readable explanation.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path   = path
        self.reason = reason
        super().__init__(f"Cannot read input '{path}': {reason}")


class UnknownBucketError(PlanningReportsError, ValueError):
    """Raised when a bucket value falls outside the six-value taxonomy.

    Renderers assume every bucket is known; an unknown value is a
    programming error and must never be silently dropped.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unrecognised bucket value: {value!r}")
