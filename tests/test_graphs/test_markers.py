"""Tests for graphs/markers.py — marker tiers, out-of-range goals, step-ups."""

from __future__ import annotations

import logging

import pytest

from planning_reports.graphs.markers import (
    MARKER_COLOURS,
    GoalDueDate,
    GoalMarkerTier,
    build_goal_due_dates,
    build_goal_marker_datasets,
    find_step_up_months,
    goal_marker_tier,
)


@pytest.mark.parametrize(
    "confidence, status, expected",
    [
        (90, None, GoalMarkerTier.CAN_BE_MET),
        (95, "cannot_be_met", GoalMarkerTier.CAN_BE_MET),
        (10, "can_be_met", GoalMarkerTier.CAN_BE_MET),
        (89, None, GoalMarkerTier.AT_RISK),
        (0.5, None, GoalMarkerTier.AT_RISK),
        (0, "at_risk", GoalMarkerTier.AT_RISK),
        (None, "at_risk", GoalMarkerTier.AT_RISK),
        (0, None, GoalMarkerTier.CANNOT_BE_MET),
        (None, None, GoalMarkerTier.CANNOT_BE_MET),
        (0, "cannot_be_met", GoalMarkerTier.CANNOT_BE_MET),
    ],
)
def test_goal_marker_tier(confidence, status, expected) -> None:
    assert goal_marker_tier(confidence, status) == expected


def test_due_dates_follow_metadata_order(make_projection) -> None:
    due = build_goal_due_dates(make_projection())
    assert [(d.month, d.goal_name) for d in due] == [(12, "Car"), (24, "House")]


def test_marker_dataset_shape() -> None:
    values = [100.0, 200.0, 300.0]
    (ds,) = build_goal_marker_datasets(
        [GoalDueDate(month=2, goal_name="Car", confidence_percent=95)], values
    )
    assert ds["type"] == "scatter"
    assert ds["label"] == "Car Due"
    assert ds["data"] == [{"x": 2, "y": 300.0}]
    assert ds["showLine"] is False
    assert ds["pointRadius"] == 8
    assert ds["pointBackgroundColor"] == MARKER_COLOURS[GoalMarkerTier.CAN_BE_MET].point


def test_marker_colours_per_tier() -> None:
    values = [1.0] * 5
    due = [
        GoalDueDate(month=1, goal_name="Green", confidence_percent=90),
        GoalDueDate(month=2, goal_name="Yellow", confidence_percent=89),
        GoalDueDate(month=3, goal_name="Red", confidence_percent=0),
    ]
    colours = [ds["pointBackgroundColor"] for ds in build_goal_marker_datasets(due, values)]
    assert colours == ["#10b981", "#f59e0b", "#ef4444"]


def test_out_of_range_goal_omitted(caplog) -> None:
    values = [1.0] * 12
    due = [
        GoalDueDate(month=11, goal_name="Last"),
        GoalDueDate(month=12, goal_name="Beyond"),
    ]
    with caplog.at_level(logging.WARNING, logger="planning_reports.graphs.markers"):
        datasets = build_goal_marker_datasets(due, values)
    assert [ds["label"] for ds in datasets] == ["Last Due"]
    assert "Beyond" in caplog.text


def test_find_step_up_months(make_projection) -> None:
    assert find_step_up_months(make_projection(n_months=30)) == [12, 24]


def test_find_step_up_ignores_other_events(make_projection_payload) -> None:
    from planning_reports.models.projection import NetworthProjectionData

    payload = make_projection_payload(n_months=5, step_up_months=())
    payload["monthlyValues"][3]["events"] = ["goal_due:car"]
    assert find_step_up_months(NetworthProjectionData.model_validate(payload)) == []
