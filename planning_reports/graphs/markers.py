"""
Goal due-date markers and step-up events for projection graphs.

Marker tiers
------------
Each goal gets one marker at its due month, coloured by a three-tier rule.
Status and confidence are both consulted (OR semantics), in this order::

  green   status == can_be_met  OR  confidence >= 90
  yellow  status == at_risk     OR  0 < confidence < 90
  red     everything else (including no status and confidence 0 / absent)

So a goal with no status but 95% confidence is green, and a goal with status
``can_be_met`` but 10% confidence is still green.

Out-of-range horizons
---------------------
A goal whose horizon does not index a month of the trajectory gets no
marker.  This is logged and skipped; the rest of the document still renders.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Sequence

from planning_reports.models.projection import NetworthProjectionData
from planning_reports.taxonomy.profiles import GoalStatus

logger = logging.getLogger(__name__)

GREEN_CONFIDENCE_PCT = 90.0
STEP_UP_EVENT_PREFIX = "step_up"


class GoalMarkerTier(StrEnum):
    """Colour tier of a goal due-date marker."""

    CAN_BE_MET = "can_be_met"
    """Green."""

    AT_RISK = "at_risk"
    """Yellow."""

    CANNOT_BE_MET = "cannot_be_met"
    """Red (default)."""


@dataclass(frozen=True)
class MarkerColours:
    point: str
    border: str


MARKER_COLOURS: dict[GoalMarkerTier, MarkerColours] = {
    GoalMarkerTier.CAN_BE_MET:    MarkerColours(point="#10b981", border="#059669"),
    GoalMarkerTier.AT_RISK:       MarkerColours(point="#f59e0b", border="#d97706"),
    GoalMarkerTier.CANNOT_BE_MET: MarkerColours(point="#ef4444", border="#dc2626"),
}


@dataclass(frozen=True)
class GoalDueDate:
    """Derived annotation: one goal's due month and feasibility signals."""

    month: int
    goal_name: str
    confidence_percent: Optional[float] = None
    status: Optional[GoalStatus] = None


def goal_marker_tier(
    confidence_percent: Optional[float],
    status: Optional[str],
) -> GoalMarkerTier:
    """Pick the marker tier for a goal; see the module docstring for the rule."""
    if status == GoalStatus.CAN_BE_MET or (
        confidence_percent is not None and confidence_percent >= GREEN_CONFIDENCE_PCT
    ):
        return GoalMarkerTier.CAN_BE_MET
    if status == GoalStatus.AT_RISK or (
        confidence_percent is not None and 0 < confidence_percent < GREEN_CONFIDENCE_PCT
    ):
        return GoalMarkerTier.AT_RISK
    return GoalMarkerTier.CANNOT_BE_MET


def build_goal_due_dates(projection: NetworthProjectionData) -> list[GoalDueDate]:
    """One ``GoalDueDate`` per goal in the projection metadata, in metadata order."""
    return [
        GoalDueDate(
            month=g.horizon_months,
            goal_name=g.goal_name,
            confidence_percent=g.confidence_percent,
            status=g.status,
        )
        for g in projection.metadata.goals
    ]


def build_goal_marker_datasets(
    due_dates: Sequence[GoalDueDate],
    networth_values: Sequence[float],
) -> list[dict]:
    """Build one scatter dataset per goal whose due month is on the trajectory.

    Args:
        due_dates:       Goal due-date annotations.
        networth_values: Total networth per month (index = month).

    Returns:
        Chart dataset dicts; goals outside ``[0, len(networth_values))`` are omitted.
    """
    datasets: list[dict] = []
    for due in due_dates:
        if not 0 <= due.month < len(networth_values):
            logger.warning(
                "Goal '%s' due at month %d is outside the projection (0-%d); marker omitted",
                due.goal_name, due.month, len(networth_values) - 1,
            )
            continue
        colours = MARKER_COLOURS[goal_marker_tier(due.confidence_percent, due.status)]
        datasets.append(
            {
                "type":                 "scatter",
                "label":                f"{due.goal_name} Due",
                "data":                 [{"x": due.month, "y": networth_values[due.month]}],
                "pointRadius":          8,
                "pointBackgroundColor": colours.point,
                "pointBorderColor":     colours.border,
                "pointBorderWidth":     2,
                "showLine":             False,
                "xAxisID":              "x",
                "yAxisID":              "y",
            }
        )
    return datasets


def find_step_up_months(projection: NetworthProjectionData) -> list[int]:
    """Months whose events include a tag starting with ``"step_up"``."""
    return [
        p.month
        for p in projection.monthly_values
        if p.events and any(e.startswith(STEP_UP_EVENT_PREFIX) for e in p.events)
    ]
