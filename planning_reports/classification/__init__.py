"""
Scenario bucket classification and summarisation.

  classifier — ordered rule table mapping one scenario run to a bucket.
  summary    — per-scenario summaries and per-bucket counts for a batch.
"""

from planning_reports.classification.classifier import classify_scenario_bucket
from planning_reports.classification.summary import build_summaries

__all__ = ["build_summaries", "classify_scenario_bucket"]
