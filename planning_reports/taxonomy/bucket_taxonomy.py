"""
Bucket taxonomy for planning scenario classification.

Every scenario lands in exactly one of six buckets explaining whether its
basic-tier goals can be met and the structural reason behind the outcome.
Buckets (1) and (2) of the planning taxonomy are merged into a single
combined bucket, labelled ``"1/2"``.

``BUCKET_META`` is the single lookup table for labels, titles, and summary
sentences.  Both the classifier and the renderers read from it, so a new
bucket cannot be added in one place and forgotten in another.

Display order
-------------
Reports list buckets success-first, not in label order::

    7  →  4  →  5  →  3  →  6  →  1/2
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from planning_reports.errors import UnknownBucketError


class BucketKey(StrEnum):
    """The six feasibility buckets."""

    SIP_NOT_NEEDED = "bucket_7_sip_not_needed_corpus_only"
    """At least one method meets all basic goals with zero or too-low SIP."""

    SKEWED_MEETS_METHOD_1_OR_2 = "bucket_4_skewed_can_meet_method1_or_2"
    """Skewed corpus; method 1 and/or method 2 meets all basic goals."""

    SKEWED_MEETS_ONLY_METHOD_3 = "bucket_5_skewed_can_meet_only_method3"
    """Skewed corpus; only method 3 (rebalancing) meets all basic goals."""

    SKEWED_CANNOT_MEET = "bucket_3_skewed_cannot_meet_with_sip"
    """Skewed corpus; no method meets all basic goals."""

    BALANCED_CANNOT_MEET = "bucket_6_balanced_cannot_meet_with_sip"
    """Balanced corpus; no method meets all basic goals."""

    CORPUS_OR_SIP_TOO_LOW = "bucket_1_2_corpus_or_sip_too_low_cannot_meet"
    """Corpus or SIP structurally too low; no method meets all basic goals."""


@dataclass(frozen=True)
class BucketMeta:
    """Display data for one bucket.

    Attributes:
        label:            Short human label matching the planning taxonomy ("7", "1/2").
        title:            One-line bucket description used in section headings.
        summary_sentence: Fixed per-scenario sentence attached by the summary builder.
    """

    label: str
    title: str
    summary_sentence: str


BUCKET_META: Mapping[BucketKey, BucketMeta] = MappingProxyType({
    BucketKey.SIP_NOT_NEEDED: BucketMeta(
        label="7",
        title="SIP is not needed; goal can be met with the corpus alone",
        summary_sentence=(
            "Bucket 7: At least one method meets all basic goals with little/no "
            "SIP dependence (corpus-only for basic tiers)."
        ),
    ),
    BucketKey.SKEWED_MEETS_METHOD_1_OR_2: BucketMeta(
        label="4",
        title="Corpus is skewed; goal can be met with the SIP (method 1 or 2)",
        summary_sentence=(
            "Bucket 4: Skewed corpus; method 1 and/or method 2 meets all basic "
            "goals with the given SIP."
        ),
    ),
    BucketKey.SKEWED_MEETS_ONLY_METHOD_3: BucketMeta(
        label="5",
        title="Corpus is skewed; goal can be met with rebalancing (only in method 3)",
        summary_sentence=(
            "Bucket 5: Skewed corpus; methods 1/2 fail but method 3 meets all "
            "basic goals via rebalancing."
        ),
    ),
    BucketKey.SKEWED_CANNOT_MEET: BucketMeta(
        label="3",
        title="Corpus is skewed; goal cannot be met with the SIP",
        summary_sentence=(
            "Bucket 3: Skewed corpus; all methods fail to meet all basic goals "
            "with the given SIP."
        ),
    ),
    BucketKey.BALANCED_CANNOT_MEET: BucketMeta(
        label="6",
        title="Corpus is balanced; goal cannot be met with the SIP",
        summary_sentence=(
            "Bucket 6: Balanced corpus; all methods fail to meet all basic goals "
            "with the given SIP."
        ),
    ),
    BucketKey.CORPUS_OR_SIP_TOO_LOW: BucketMeta(
        label="1/2",
        title="Corpus/SIP is low; goal cannot be met (combined buckets 1 and 2)",
        summary_sentence=(
            "Bucket 1/2: Corpus/SIP too low (combined); all methods fail to meet "
            "all basic goals."
        ),
    ),
})

BUCKET_DISPLAY_ORDER: tuple[BucketKey, ...] = (
    BucketKey.SIP_NOT_NEEDED,
    BucketKey.SKEWED_MEETS_METHOD_1_OR_2,
    BucketKey.SKEWED_MEETS_ONLY_METHOD_3,
    BucketKey.SKEWED_CANNOT_MEET,
    BucketKey.BALANCED_CANNOT_MEET,
    BucketKey.CORPUS_OR_SIP_TOO_LOW,
)


def require_bucket(value: object) -> BucketKey:
    """Coerce ``value`` to a ``BucketKey`` or fail loudly.

    Raises:
        UnknownBucketError: If ``value`` is not one of the six bucket values.
    """
    try:
        return BucketKey(value)
    except ValueError:
        raise UnknownBucketError(value) from None


def bucket_meta(bucket: object) -> BucketMeta:
    """Return the ``BucketMeta`` for ``bucket``.

    Raises:
        UnknownBucketError: If ``bucket`` is outside the taxonomy.
    """
    return BUCKET_META[require_bucket(bucket)]
