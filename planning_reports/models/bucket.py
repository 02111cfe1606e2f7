"""
Classification and summary output models.

``BucketClassification`` is the classifier's verdict for one scenario.
``ScenarioBucketSummary`` adds scenario identity, bucket display data and the
fixed summary sentence.  ``BucketSummaryResult`` is the full batch output:
summaries in input order plus a count for every bucket.

``to_document()`` methods produce the camelCase dict shape written to the
JSON summary file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from planning_reports.taxonomy.bucket_taxonomy import BUCKET_DISPLAY_ORDER, BucketKey
from planning_reports.taxonomy.profiles import CorpusProfile, SipProfile


class BucketDebug(BaseModel):
    """Raw inputs behind a classification, kept for human audit."""

    model_config = ConfigDict(frozen=True)

    corpus_profile: CorpusProfile
    sip_profile: SipProfile
    sip_is_zero: bool
    method1_met: bool
    method2_met: bool
    method3_met: bool

    def to_document(self) -> dict:
        return {
            "corpusProfile": self.corpus_profile.value,
            "sipProfile":    self.sip_profile.value,
            "sipIsZero":     self.sip_is_zero,
            "method1Met":    self.method1_met,
            "method2Met":    self.method2_met,
            "method3Met":    self.method3_met,
        }


class BucketClassification(BaseModel):
    """Classifier verdict for one scenario.

    Attributes:
        bucket:       One of the six ``BucketKey`` values.
        needs_review: True when the scenario succeeded under some method but
                      matched no specific bucket rule (fallback to bucket 7).
        debug:        Profiles and per-method outcomes the decision was based on.
    """

    model_config = ConfigDict(frozen=True)

    bucket: BucketKey
    needs_review: bool = False
    debug: BucketDebug


class ScenarioRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class ScenarioBucketSummary(BaseModel):
    """Human-readable summary of one classified scenario."""

    model_config = ConfigDict(frozen=True)

    scenario: ScenarioRef
    bucket: BucketKey
    bucket_label: str
    bucket_title: str
    needs_review: bool
    debug: BucketDebug
    summary_sentence: str

    def to_document(self) -> dict:
        return {
            "scenario":        {"id": self.scenario.id, "name": self.scenario.name},
            "bucket":          self.bucket.value,
            "bucketLabel":     self.bucket_label,
            "bucketTitle":     self.bucket_title,
            "needsReview":     self.needs_review,
            "debug":           self.debug.to_document(),
            "summarySentence": self.summary_sentence,
        }


class BucketSummaryResult(BaseModel):
    """Batch output of the summary builder.

    ``counts_by_bucket`` always holds all six buckets (zero when empty) and
    sums to ``len(summaries)``.
    """

    model_config = ConfigDict(frozen=True)

    summaries: list[ScenarioBucketSummary]
    counts_by_bucket: dict[BucketKey, int]

    @model_validator(mode="after")
    def validate_counts(self) -> "BucketSummaryResult":
        missing = [b for b in BUCKET_DISPLAY_ORDER if b not in self.counts_by_bucket]
        if missing:
            raise ValueError(f"counts_by_bucket is missing buckets: {missing}.")
        total = sum(self.counts_by_bucket.values())
        if total != len(self.summaries):
            raise ValueError(
                f"counts_by_bucket sums to {total} but there are "
                f"{len(self.summaries)} summaries."
            )
        return self

    @property
    def needs_review(self) -> list[ScenarioBucketSummary]:
        return [s for s in self.summaries if s.needs_review]
