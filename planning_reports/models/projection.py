"""
Networth projection input models.

``NetworthProjectionData`` is the month-by-month trajectory the projection
engine produces for one scenario, one planning method and one goal tier.  It
is read-only input to the graph builder.

Month indices are dense and 0-based: entry *i* of ``monthly_values`` is
month *i*.  This is enforced at validation time so that the graph builder can
index the trajectory by month directly.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from planning_reports.taxonomy.profiles import GoalStatus

_INPUT_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class MonthlyNetworthPoint(BaseModel):
    """Networth snapshot for one month.

    Attributes:
        month:             0-based month index.
        total_networth:    Combined corpus value across all goals.
        sip_contributions: Cumulative SIP added up to this month.
        corpus_by_goal:    Goal id → corpus value, when the engine provides it.
        events:            Event tags, e.g. ``"goal_due:car"`` or ``"step_up:12"``.
    """

    model_config = _INPUT_CONFIG

    month: int = Field(ge=0)
    total_networth: float = Field(alias="totalNetworth")
    sip_contributions: float = Field(default=0.0, alias="sipContributions")
    corpus_by_goal: Optional[dict[str, float]] = Field(default=None, alias="corpusByGoal")
    events: Optional[list[str]] = None


class ProjectionGoal(BaseModel):
    model_config = _INPUT_CONFIG

    goal_id: Optional[str] = Field(default=None, alias="goalId")
    goal_name: str = Field(alias="goalName")
    horizon_months: int = Field(alias="horizonMonths")
    basic_tier_corpus: Optional[float] = Field(default=None, alias="basicTierCorpus")
    confidence_percent: Optional[float] = Field(default=None, alias="confidencePercent")
    status: Optional[GoalStatus] = None


class ProjectionMetadata(BaseModel):
    """Planning parameters shown in the graph's metadata panel."""

    model_config = _INPUT_CONFIG

    initial_total_corpus: float = Field(alias="initialTotalCorpus")
    total_monthly_sip: float = Field(alias="totalMonthlySIP")
    step_up_percent: float = Field(default=0.0, alias="stepUpPercent")
    goals: list[ProjectionGoal] = []


class NetworthProjectionData(BaseModel):
    """Month-by-month networth trajectory for one scenario and method."""

    model_config = _INPUT_CONFIG

    method: str
    monthly_values: list[MonthlyNetworthPoint] = Field(alias="monthlyValues")
    max_month: int = Field(alias="maxMonth", ge=0)
    metadata: ProjectionMetadata

    @model_validator(mode="after")
    def validate_dense_months(self) -> "NetworthProjectionData":
        for idx, point in enumerate(self.monthly_values):
            if point.month != idx:
                raise ValueError(
                    f"monthlyValues must be dense and 0-based: entry {idx} "
                    f"has month {point.month}."
                )
        return self

    @property
    def networth_values(self) -> list[float]:
        return [p.total_networth for p in self.monthly_values]
