"""
Tests for models/scenario.py and models/bucket.py.

Covers:
  - camelCase engine payloads parse; snake_case names also accepted
  - unknown keys are ignored
  - invalid enum values and negative SIP raise ValidationError
  - frozen models reject mutation
  - BucketSummaryResult enforces complete, consistent counts
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from planning_reports.classification.summary import build_summaries
from planning_reports.models.bucket import BucketSummaryResult
from planning_reports.models.scenario import ScenarioRunResult, SipInput
from planning_reports.taxonomy.bucket_taxonomy import BucketKey
from planning_reports.taxonomy.profiles import CorpusProfile, SipProfile


class TestScenarioRunResult:
    def test_parses_engine_payload(self, make_run_payload):
        run = ScenarioRunResult.model_validate(make_run_payload(scenario_id="abc", m2=True))
        assert run.scenario.id == "abc"
        assert run.scenario.classification.corpus_profile == CorpusProfile.SKEWED
        assert run.scenario.classification.sip_profile == SipProfile.RIGHT_AMOUNT
        assert run.scenario.sip_input.monthly_sip == 25_000
        assert run.results.method2.all_basic_met is True
        assert run.results.method1.all_basic_met is False

    def test_snake_case_names_accepted(self):
        sip = SipInput(monthly_sip=100.0)
        assert sip.monthly_sip == 100.0

    def test_unknown_corpus_profile_rejected(self, make_run_payload):
        with pytest.raises(ValidationError):
            ScenarioRunResult.model_validate(make_run_payload(corpus="lopsided"))

    def test_negative_sip_rejected(self, make_run_payload):
        with pytest.raises(ValidationError):
            ScenarioRunResult.model_validate(make_run_payload(monthly_sip=-1))

    def test_missing_method_rejected(self, make_run_payload):
        payload = make_run_payload()
        del payload["results"]["method3"]
        with pytest.raises(ValidationError):
            ScenarioRunResult.model_validate(payload)

    def test_frozen(self, make_run):
        run = make_run()
        with pytest.raises(ValidationError):
            run.scenario = None  # type: ignore[assignment]


class TestBucketSummaryResult:
    def test_counts_must_cover_all_buckets(self, make_run):
        result = build_summaries([make_run()])
        counts = dict(result.counts_by_bucket)
        del counts[BucketKey.CORPUS_OR_SIP_TOO_LOW]
        with pytest.raises(ValidationError):
            BucketSummaryResult(summaries=result.summaries, counts_by_bucket=counts)

    def test_counts_must_sum_to_summaries(self, make_run):
        result = build_summaries([make_run()])
        counts = dict(result.counts_by_bucket)
        counts[BucketKey.SIP_NOT_NEEDED] += 1
        with pytest.raises(ValidationError):
            BucketSummaryResult(summaries=result.summaries, counts_by_bucket=counts)

    def test_summary_document_shape(self, make_run):
        [s] = build_summaries([make_run(scenario_id="d1", m3=True)]).summaries
        doc = s.to_document()
        assert list(doc) == [
            "scenario", "bucket", "bucketLabel", "bucketTitle",
            "needsReview", "debug", "summarySentence",
        ]
        assert doc["bucket"] == "bucket_5_skewed_can_meet_only_method3"
        assert doc["debug"]["method3Met"] is True
