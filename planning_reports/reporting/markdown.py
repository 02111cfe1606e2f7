"""
Markdown bucket summary renderer.

Document layout::

    ## Planning scenarios – Bucket summary
    <intro note>

    ### Bucket 7: <title>          ← six sections, fixed display order
    Count: **n**
    - **<name>** (`<id>`) (needs-review)
      - corpus: ..., sip: ..., sipIsZero: ...
      - all_basic_met: method1=..., method2=..., method3=...
      - summary: <sentence>

    ### Needs-review                ← only when something is flagged

Rendering is deterministic: the same summaries and counts always produce the
same string.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from planning_reports.models.bucket import ScenarioBucketSummary
from planning_reports.taxonomy.bucket_taxonomy import (
    BUCKET_DISPLAY_ORDER,
    BucketKey,
    bucket_meta,
    require_bucket,
)

TITLE = "## Planning scenarios – Bucket summary"
INTRO = (
    "Buckets follow your definitions (basic-tier only). Note: buckets (1) and (2) "
    "are treated as the same combined bucket (1/2)."
)
EMPTY_BUCKET_LINE = "_No scenarios currently classified into this bucket._"
NEEDS_REVIEW_HEADING = "### Needs-review"
NEEDS_REVIEW_NOTE = (
    "These scenarios were successful but don’t map cleanly to your provided bucket "
    "list, so they were placed in bucket 7 as a fallback."
)


def _bool(v: bool) -> str:
    return "true" if v else "false"


def format_scenario_bullet(summary: ScenarioBucketSummary) -> list[str]:
    """Return the bullet lines for one scenario inside its bucket section."""
    review = " (needs-review)" if summary.needs_review else ""
    d = summary.debug
    return [
        f"- **{summary.scenario.name}** (`{summary.scenario.id}`){review}",
        f"  - corpus: `{d.corpus_profile.value}`, sip: `{d.sip_profile.value}`, "
        f"sipIsZero: `{_bool(d.sip_is_zero)}`",
        f"  - all_basic_met: method1=`{_bool(d.method1_met)}`, "
        f"method2=`{_bool(d.method2_met)}`, method3=`{_bool(d.method3_met)}`",
        f"  - summary: {summary.summary_sentence}",
    ]


def render_bucket_markdown(
    summaries: Sequence[ScenarioBucketSummary],
    counts_by_bucket: Mapping[BucketKey, int],
) -> str:
    """Render the bucket summary as a Markdown document.

    Args:
        summaries:        Per-scenario summaries, in input order.
        counts_by_bucket: Count per bucket (missing buckets render as 0).

    Returns:
        Markdown text, newline-joined, without a trailing newline.

    Raises:
        UnknownBucketError: If any summary or count key is outside the taxonomy.
    """
    for s in summaries:
        require_bucket(s.bucket)
    for key in counts_by_bucket:
        require_bucket(key)

    lines: list[str] = [TITLE, "", INTRO, ""]

    for bucket in BUCKET_DISPLAY_ORDER:
        meta = bucket_meta(bucket)
        in_bucket = [s for s in summaries if s.bucket == bucket]
        lines.append(f"### Bucket {meta.label}: {meta.title}")
        lines.append("")
        lines.append(f"Count: **{counts_by_bucket.get(bucket, 0)}**")
        lines.append("")
        if not in_bucket:
            lines.append(EMPTY_BUCKET_LINE)
            lines.append("")
            continue
        for s in in_bucket:
            lines.extend(format_scenario_bullet(s))
        lines.append("")

    flagged = [s for s in summaries if s.needs_review]
    if flagged:
        lines.append(NEEDS_REVIEW_HEADING)
        lines.append("")
        lines.append(NEEDS_REVIEW_NOTE)
        lines.append("")
        for s in flagged:
            lines.append(f"- **{s.scenario.name}** (`{s.scenario.id}`)")
        lines.append("")

    return "\n".join(lines)
