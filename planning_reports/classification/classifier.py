"""
Rule-based bucket classifier for planning scenario runs.

Only basic-tier goals count.  For each method the classifier asks one
question: are *all* basic goals met?  Those three booleans, the corpus
profile and the SIP profile decide the bucket.

Rule table
----------
Rules are evaluated top-down; the first matching rule wins::

  1. sip_not_needed        any method met, and SIP is zero or ``sip_too_low``  → 7
  2. skewed_method_1_or_2  skewed corpus, method 1 or method 2 met             → 4
  3. skewed_only_method_3  skewed corpus, only method 3 met                    → 5
  4. skewed_cannot_meet    skewed corpus, no method met                        → 3
  5. balanced_cannot_meet  balanced corpus, no method met                      → 6
  6. too_low_cannot_meet   no method met (any other corpus profile)            → 1/2

A scenario that succeeds under some method but matches none of the rules
(e.g. a balanced corpus with an adequate SIP) falls back to bucket 7 with
``needs_review=True``.  The fallback is a defined outcome, not an error.

The classifier is pure: the same ``ScenarioRunResult`` always yields the same
``BucketClassification``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from planning_reports.models.bucket import BucketClassification, BucketDebug
from planning_reports.models.scenario import ScenarioRunResult
from planning_reports.taxonomy.bucket_taxonomy import BucketKey
from planning_reports.taxonomy.profiles import CorpusProfile, SipProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodOutcome:
    """Everything a bucket rule may look at for one scenario."""

    corpus_profile: CorpusProfile
    sip_profile: SipProfile
    sip_is_zero: bool
    method1_met: bool
    method2_met: bool
    method3_met: bool

    @property
    def any_met(self) -> bool:
        return self.method1_met or self.method2_met or self.method3_met

    @property
    def skewed(self) -> bool:
        return self.corpus_profile == CorpusProfile.SKEWED

    @property
    def balanced(self) -> bool:
        return self.corpus_profile == CorpusProfile.BALANCED

    @property
    def sip_negligible(self) -> bool:
        return self.sip_is_zero or self.sip_profile == SipProfile.TOO_LOW

    def to_debug(self) -> BucketDebug:
        return BucketDebug(
            corpus_profile=self.corpus_profile,
            sip_profile=self.sip_profile,
            sip_is_zero=self.sip_is_zero,
            method1_met=self.method1_met,
            method2_met=self.method2_met,
            method3_met=self.method3_met,
        )


@dataclass(frozen=True)
class BucketRule:
    name: str
    bucket: BucketKey
    predicate: Callable[[MethodOutcome], bool]


BUCKET_RULES: tuple[BucketRule, ...] = (
    BucketRule(
        "sip_not_needed",
        BucketKey.SIP_NOT_NEEDED,
        lambda o: o.any_met and o.sip_negligible,
    ),
    BucketRule(
        "skewed_method_1_or_2",
        BucketKey.SKEWED_MEETS_METHOD_1_OR_2,
        lambda o: o.skewed and (o.method1_met or o.method2_met),
    ),
    BucketRule(
        "skewed_only_method_3",
        BucketKey.SKEWED_MEETS_ONLY_METHOD_3,
        lambda o: o.skewed and not o.method1_met and not o.method2_met and o.method3_met,
    ),
    BucketRule(
        "skewed_cannot_meet",
        BucketKey.SKEWED_CANNOT_MEET,
        lambda o: o.skewed and not o.any_met,
    ),
    BucketRule(
        "balanced_cannot_meet",
        BucketKey.BALANCED_CANNOT_MEET,
        lambda o: o.balanced and not o.any_met,
    ),
    BucketRule(
        "too_low_cannot_meet",
        BucketKey.CORPUS_OR_SIP_TOO_LOW,
        lambda o: not o.any_met,
    ),
)

FALLBACK_BUCKET = BucketKey.SIP_NOT_NEEDED


def method_outcome(run: ScenarioRunResult) -> MethodOutcome:
    """Reduce a scenario run to the fields the bucket rules read."""
    scenario = run.scenario
    return MethodOutcome(
        corpus_profile=scenario.classification.corpus_profile,
        sip_profile=scenario.classification.sip_profile,
        sip_is_zero=scenario.sip_input.monthly_sip == 0,
        method1_met=run.results.method1.all_basic_met,
        method2_met=run.results.method2.all_basic_met,
        method3_met=run.results.method3.all_basic_met,
    )


def match_rule(outcome: MethodOutcome) -> BucketRule | None:
    """Return the first rule in ``BUCKET_RULES`` that matches, or None."""
    for rule in BUCKET_RULES:
        if rule.predicate(outcome):
            return rule
    return None


def classify_scenario_bucket(run: ScenarioRunResult) -> BucketClassification:
    """Classify one scenario run into a feasibility bucket.

    Args:
        run: Scenario definition plus method 1/2/3 results.

    Returns:
        ``BucketClassification`` with the bucket, the needs-review flag, and
        the debug fields the decision was based on.
    """
    outcome = method_outcome(run)
    rule = match_rule(outcome)

    if rule is None:
        logger.debug(
            "Scenario %s matched no bucket rule; falling back to %s (needs review)",
            run.scenario.id, FALLBACK_BUCKET.value,
        )
        return BucketClassification(
            bucket=FALLBACK_BUCKET, needs_review=True, debug=outcome.to_debug()
        )

    logger.debug(
        "Scenario %s -> %s (rule=%s)", run.scenario.id, rule.bucket.value, rule.name
    )
    return BucketClassification(bucket=rule.bucket, needs_review=False, debug=outcome.to_debug())
