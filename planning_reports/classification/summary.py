"""
Summary builder: classified scenarios → per-scenario summaries + counts.

Each summary carries a fixed sentence chosen by bucket alone; the
needs-review flag does not change the wording.  Counts cover all six buckets,
with zero for buckets nothing was classified into, so downstream documents
always have the same shape.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable

from planning_reports.classification.classifier import classify_scenario_bucket
from planning_reports.models.bucket import (
    BucketSummaryResult,
    ScenarioBucketSummary,
    ScenarioRef,
)
from planning_reports.models.scenario import ScenarioRunResult
from planning_reports.taxonomy.bucket_taxonomy import (
    BUCKET_DISPLAY_ORDER,
    BucketKey,
    bucket_meta,
    require_bucket,
)

logger = logging.getLogger(__name__)


def summary_sentence(bucket: BucketKey) -> str:
    """Return the fixed summary sentence for ``bucket``.

    Raises:
        UnknownBucketError: If ``bucket`` is outside the taxonomy.
    """
    return bucket_meta(bucket).summary_sentence


def summarize_run(run: ScenarioRunResult) -> ScenarioBucketSummary:
    """Classify one run and wrap the verdict in a ``ScenarioBucketSummary``."""
    classification = classify_scenario_bucket(run)
    meta = bucket_meta(classification.bucket)
    return ScenarioBucketSummary(
        scenario=ScenarioRef(id=run.scenario.id, name=run.scenario.name),
        bucket=classification.bucket,
        bucket_label=meta.label,
        bucket_title=meta.title,
        needs_review=classification.needs_review,
        debug=classification.debug,
        summary_sentence=meta.summary_sentence,
    )


def count_by_bucket(summaries: Iterable[ScenarioBucketSummary]) -> dict[BucketKey, int]:
    """Tally summaries per bucket.

    Returns:
        Dict with every bucket in display order; absent buckets map to 0.
    """
    tally = Counter(require_bucket(s.bucket) for s in summaries)
    return {bucket: tally.get(bucket, 0) for bucket in BUCKET_DISPLAY_ORDER}


def build_summaries(runs: Iterable[ScenarioRunResult]) -> BucketSummaryResult:
    """Classify and summarise a batch of scenario runs.

    Args:
        runs: Scenario run results, in input order.

    Returns:
        ``BucketSummaryResult`` with summaries in input order and counts for
        all six buckets.
    """
    summaries = [summarize_run(run) for run in runs]
    counts = count_by_bucket(summaries)
    logger.info(
        "Classified %d scenario(s); %d need review",
        len(summaries), sum(1 for s in summaries if s.needs_review),
    )
    return BucketSummaryResult(summaries=summaries, counts_by_bucket=counts)
