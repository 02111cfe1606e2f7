"""
Scenario run input models.

A ``ScenarioRunResult`` is one entry of the projection engine's scenario
output file: the scenario definition plus the result of running it through
planning methods 1, 2 and 3.  The engine writes camelCase keys and far more
fields than are read here; unknown keys are ignored and every field also
accepts its snake_case name.

All models are frozen.  They are produced entirely upstream and never
mutated by this package.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from planning_reports.taxonomy.profiles import (
    CorpusProfile,
    GoalStatus,
    GoalTier,
    SipProfile,
)

_INPUT_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class GoalFeasibilityRow(BaseModel):
    """One (goal, tier) row of a method's goal feasibility table."""

    model_config = _INPUT_CONFIG

    goal_id: str = Field(alias="goalId")
    goal_name: str = Field(default="", alias="goalName")
    tier: GoalTier
    status: GoalStatus
    confidence_percent: float = Field(default=0.0, alias="confidencePercent")


class GoalFeasibilityTable(BaseModel):
    model_config = _INPUT_CONFIG

    rows: list[GoalFeasibilityRow] = []


class MethodResult(BaseModel):
    """Outcome of one planning method for one scenario."""

    model_config = _INPUT_CONFIG

    method: Optional[Literal["method1", "method2", "method3"]] = None
    goal_feasibility_table: GoalFeasibilityTable = Field(alias="goalFeasibilityTable")

    @property
    def all_basic_met(self) -> bool:
        """True when there is at least one basic-tier row and every one can be met.

        A table with no basic rows never counts as met.
        """
        basic = [r for r in self.goal_feasibility_table.rows if r.tier == GoalTier.BASIC]
        return bool(basic) and all(r.status == GoalStatus.CAN_BE_MET for r in basic)


class MethodResultsBundle(BaseModel):
    model_config = _INPUT_CONFIG

    method1: MethodResult
    method2: MethodResult
    method3: MethodResult


class ScenarioClassification(BaseModel):
    """Permutation axes assigned to the scenario by the engine."""

    model_config = _INPUT_CONFIG

    corpus_profile: CorpusProfile = Field(alias="corpusProfile")
    sip_profile: SipProfile = Field(alias="sipProfile")
    goal_profile: Optional[str] = Field(default=None, alias="goalProfile")
    timeline_profile: Optional[str] = Field(default=None, alias="timelineProfile")


class SipInput(BaseModel):
    model_config = _INPUT_CONFIG

    monthly_sip: float = Field(alias="monthlySIP")
    stretch_sip_percent: float = Field(default=0.0, alias="stretchSIPPercent")
    annual_step_up_percent: float = Field(default=0.0, alias="annualStepUpPercent")

    @field_validator("monthly_sip")
    @classmethod
    def non_negative_sip(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"monthlySIP must be >= 0, got {v}.")
        return v


class PlanningScenario(BaseModel):
    """Scenario identity plus the descriptive inputs the classifier reads."""

    model_config = _INPUT_CONFIG

    id: str
    name: str
    classification: ScenarioClassification
    sip_input: SipInput = Field(alias="sipInput")
    description: Optional[str] = None

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("scenario id must not be empty.")
        return v


class ScenarioRunResult(BaseModel):
    """A scenario together with its method 1/2/3 results."""

    model_config = _INPUT_CONFIG

    scenario: PlanningScenario
    results: MethodResultsBundle
