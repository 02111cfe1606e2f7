"""
Shared pytest fixtures for the Planning Reports test suite.

Provides:
  - ``make_run_payload`` / ``make_run``: build scenario run results in the
    projection engine's camelCase JSON shape (raw dict or validated model).
  - ``one_per_bucket_payloads``: six scenario runs, one per bucket by construction.
  - ``make_projection_payload`` / ``make_projection``: networth projections.
  - ``app_config``: an ``AppConfig`` pointing all outputs at ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from planning_reports.config import AppConfig, LoggingConfig, PathsConfig
from planning_reports.models.projection import NetworthProjectionData
from planning_reports.models.scenario import ScenarioRunResult


# ── Scenario run factories ────────────────────────────────────────────────────


def _method_payload(method: str, basic_met: bool) -> dict:
    """One method result: a basic row (met or not) plus an ambitious row that never counts."""
    return {
        "method": method,
        "goalFeasibilityTable": {
            "rows": [
                {
                    "goalId": "retirement",
                    "goalName": "Retirement",
                    "tier": "basic",
                    "status": "can_be_met" if basic_met else "cannot_be_met",
                    "confidencePercent": 95.0 if basic_met else 20.0,
                    "targetAmount": 10_000_000,
                },
                {
                    "goalId": "retirement",
                    "goalName": "Retirement",
                    "tier": "ambitious",
                    "status": "at_risk",
                    "confidencePercent": 60.0,
                },
            ]
        },
        "sipAllocation": {"perGoalAllocations": []},
    }


def _run_payload(
    scenario_id: str = "scn_01",
    name: str = "Scenario",
    corpus: str = "skewed_corpus",
    sip: str = "sip_right_amount",
    monthly_sip: float = 25_000,
    m1: bool = False,
    m2: bool = False,
    m3: bool = False,
) -> dict:
    return {
        "scenario": {
            "id": scenario_id,
            "name": name,
            "kind": "baseline",
            "classification": {
                "corpusProfile": corpus,
                "sipProfile": sip,
                "goalProfile": "single_goal",
                "timelineProfile": "long_term",
            },
            "description": f"{name} description",
            "sipInput": {
                "monthlySIP": monthly_sip,
                "stretchSIPPercent": 0,
                "annualStepUpPercent": 10,
            },
        },
        "results": {
            "method1": _method_payload("method1", m1),
            "method2": _method_payload("method2", m2),
            "method3": _method_payload("method3", m3),
        },
    }


@pytest.fixture
def make_run_payload() -> Callable[..., dict]:
    """Factory for raw scenario run dicts (as written by the projection engine)."""
    return _run_payload


@pytest.fixture
def make_run() -> Callable[..., ScenarioRunResult]:
    """Factory for validated ``ScenarioRunResult`` models."""

    def _make(**kwargs) -> ScenarioRunResult:
        return ScenarioRunResult.model_validate(_run_payload(**kwargs))

    return _make


@pytest.fixture
def one_per_bucket_payloads() -> list[dict]:
    """Six runs landing in buckets 7, 4, 5, 3, 6 and 1/2 respectively."""
    return [
        _run_payload("b7", "Corpus only", corpus="balanced_corpus", sip="sip_too_low",
                     monthly_sip=0, m1=True),
        _run_payload("b4", "Skewed via SIP", m1=True, m2=True),
        _run_payload("b5", "Skewed via rebalance", m3=True),
        _run_payload("b3", "Skewed fails"),
        _run_payload("b6", "Balanced fails", corpus="balanced_corpus"),
        _run_payload("b12", "Nothing to work with", corpus="no_corpus", sip="sip_too_low",
                     monthly_sip=1_000),
    ]


@pytest.fixture
def unmatched_success_payload() -> dict:
    """Balanced corpus, adequate SIP, method 2 succeeds: matches no bucket rule."""
    return _run_payload("fallback", "Balanced success", corpus="balanced_corpus", m2=True)


# ── Projection factories ──────────────────────────────────────────────────────


def _projection_payload(
    n_months: int = 25,
    goals: list[dict] | None = None,
    step_up_months: tuple[int, ...] = (12, 24),
    method: str = "method1",
) -> dict:
    monthly = []
    for m in range(n_months):
        events = [f"step_up:{m}"] if m in step_up_months else None
        point = {
            "month": m,
            "totalNetworth": 1_000_000 + 10_000 * m,
            "corpusByGoal": {"house": 600_000 + 6_000 * m, "car": 400_000 + 4_000 * m},
            "sipContributions": 10_000 * m,
        }
        if events:
            point["events"] = events
        monthly.append(point)
    if goals is None:
        goals = [
            {"goalId": "car", "goalName": "Car", "horizonMonths": 12,
             "basicTierCorpus": 500_000, "confidencePercent": 95, "status": "can_be_met"},
            {"goalId": "house", "goalName": "House", "horizonMonths": 24,
             "basicTierCorpus": 2_000_000, "confidencePercent": 70, "status": "at_risk"},
        ]
    return {
        "method": method,
        "monthlyValues": monthly,
        "maxMonth": n_months - 1,
        "metadata": {
            "initialTotalCorpus": 1_000_000,
            "totalMonthlySIP": 10_000,
            "stepUpPercent": 10,
            "goals": goals,
        },
    }


@pytest.fixture
def make_projection_payload() -> Callable[..., dict]:
    return _projection_payload


@pytest.fixture
def make_projection() -> Callable[..., NetworthProjectionData]:
    def _make(**kwargs) -> NetworthProjectionData:
        return NetworthProjectionData.model_validate(_projection_payload(**kwargs))

    return _make


# ── Config ────────────────────────────────────────────────────────────────────


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Config with every output path under ``tmp_path`` and no log file."""
    return AppConfig(
        paths=PathsConfig(
            scenario_runs_file=str(tmp_path / "runs.json"),
            output_dir=str(tmp_path / "docs"),
            graphs_dir=str(tmp_path / "graphs"),
        ),
        logging=LoggingConfig(level="DEBUG", log_file=""),
    )
