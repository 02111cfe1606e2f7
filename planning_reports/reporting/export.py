"""
JSON document shape and flat-file writers.

All writer functions create missing parent directories, write UTF-8, and
return the written ``Path``.  ``OSError`` from the filesystem is not caught:
a failed write aborts the run.

``to_json_document()`` is the machine-readable counterpart of the Markdown
report.  Its keys are camelCase to match the projection engine's own files::

    {
      "generatedAt":    "2026-10-18T09:00:00+00:00",
      "countsByBucket": {"bucket_7_sip_not_needed_corpus_only": 2, ...},
      "summaries":      [{"scenario": {...}, "bucket": "...", ...}, ...]
    }

Everything except ``generatedAt`` is a pure function of the input, and
``json.dumps`` is called without ``sort_keys`` on dicts built in a fixed
order, so two runs on the same input differ only in that field.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Mapping, Sequence

from planning_reports.models.bucket import ScenarioBucketSummary
from planning_reports.taxonomy.bucket_taxonomy import (
    BUCKET_DISPLAY_ORDER,
    BucketKey,
    require_bucket,
)
from planning_reports.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


def to_json_document(
    summaries: Sequence[ScenarioBucketSummary],
    counts_by_bucket: Mapping[BucketKey, int],
    generated_at: datetime | str | None = None,
) -> dict:
    """Build the JSON summary document.

    Args:
        summaries:        Per-scenario summaries, in input order.
        counts_by_bucket: Count per bucket; every bucket is emitted, 0 if absent.
        generated_at:     Timestamp to record.  Defaults to ``utcnow()``.

    Returns:
        Dict ready for ``json.dumps``.

    Raises:
        UnknownBucketError: If a count key is outside the taxonomy.
    """
    for key in counts_by_bucket:
        require_bucket(key)

    if generated_at is None:
        generated_at = utcnow()
    if isinstance(generated_at, datetime):
        generated_at = generated_at.isoformat()

    return {
        "generatedAt":    generated_at,
        "countsByBucket": {
            bucket.value: counts_by_bucket.get(bucket, 0) for bucket in BUCKET_DISPLAY_ORDER
        },
        "summaries":      [s.to_document() for s in summaries],
    }


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False, default=str), encoding="utf-8")
    logger.info("Wrote JSON: %s", path)
    return path


def export_to_text(text: str, path: Path) -> Path:
    """Write ``text`` (Markdown, HTML) to ``path``, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote document: %s", path)
    return path
