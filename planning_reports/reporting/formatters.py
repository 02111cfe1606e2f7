"""
Plain-text console formatters for CLI reporting commands.

All formatters accept already-built summary objects and return multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

from planning_reports.models.bucket import ScenarioBucketSummary
from planning_reports.taxonomy.bucket_taxonomy import (
    BUCKET_DISPLAY_ORDER,
    BucketKey,
    bucket_meta,
)


def format_bucket_coverage(counts_by_bucket: Mapping[BucketKey, int]) -> str:
    """Return one line per bucket, in display order::

        Bucket coverage:
        - Bucket 7: 2
        - Bucket 4: 0
        ...
    """
    lines = ["Bucket coverage:"]
    for bucket in BUCKET_DISPLAY_ORDER:
        meta = bucket_meta(bucket)
        lines.append(f"- Bucket {meta.label}: {counts_by_bucket.get(bucket, 0)}")
    return "\n".join(lines)


def format_needs_review(summaries: Sequence[ScenarioBucketSummary]) -> str:
    """List needs-review scenario ids, or return an empty string if none."""
    flagged = [s for s in summaries if s.needs_review]
    if not flagged:
        return ""
    lines = [f"Needs-review scenarios (fallback bucket 7): {len(flagged)}"]
    lines.extend(f"- {s.scenario.id}" for s in flagged)
    return "\n".join(lines)


def format_written_paths(paths: Sequence[Path | str]) -> str:
    return "\n".join(f"  Wrote: {p}" for p in paths)
