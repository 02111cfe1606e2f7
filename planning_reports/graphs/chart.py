"""
Declarative chart specification for a networth projection.

``build_chart_config()`` returns a plain dict in the shape the browser-side
charting library (Chart.js 4) expects.  The dict is pure data: the tick and
tooltip formatting functions cannot be expressed in JSON, so the document
template attaches them in the page script (see ``document.py``).

Series:
  - "Total Networth": line, filled, one ``{x: month, y: value}`` point per month.
  - One scatter series per in-range goal due date (no connecting line).

The x axis is linear over month indices with a tick every 12 months; the
page script maps each tick value back through ``data.labels``.
"""

from __future__ import annotations

from planning_reports.graphs.labels import month_labels
from planning_reports.graphs.markers import build_goal_due_dates, build_goal_marker_datasets
from planning_reports.models.projection import NetworthProjectionData

NETWORTH_LINE_COLOUR = "#3b82f6"
NETWORTH_FILL_COLOUR = "rgba(59, 130, 246, 0.1)"
CHART_TITLE = "Month-by-Month Networth Projection"


def networth_dataset(networth_values: list[float]) -> dict:
    return {
        "label":           "Total Networth",
        "data":            [{"x": i, "y": v} for i, v in enumerate(networth_values)],
        "borderColor":     NETWORTH_LINE_COLOUR,
        "backgroundColor": NETWORTH_FILL_COLOUR,
        "borderWidth":     2,
        "fill":            True,
        "tension":         0.1,
        "xAxisID":         "x",
        "yAxisID":         "y",
    }


def build_chart_config(
    projection: NetworthProjectionData,
    currency_symbol: str = "₹",
) -> dict:
    """Build the chart specification for one projection.

    Args:
        projection:      Monthly networth trajectory and goal metadata.
        currency_symbol: Used in the y-axis title.

    Returns:
        Chart configuration dict (``type``, ``data``, ``options``).
    """
    values = projection.networth_values
    datasets = [networth_dataset(values)]
    datasets.extend(build_goal_marker_datasets(build_goal_due_dates(projection), values))

    return {
        "type": "line",
        "data": {
            "labels":   month_labels(len(values)),
            "datasets": datasets,
        },
        "options": {
            "responsive":          True,
            "maintainAspectRatio": False,
            "plugins": {
                "title":   {"display": True, "text": CHART_TITLE, "font": {"size": 18}},
                "legend":  {"display": True, "position": "top"},
                "tooltip": {"mode": "index", "intersect": False},
            },
            "scales": {
                "x": {
                    "type":     "linear",
                    "position": "bottom",
                    "title":    {"display": True, "text": "Time (Months)"},
                    "ticks":    {"maxRotation": 45, "minRotation": 45, "stepSize": 12},
                },
                "y": {
                    "title": {"display": True, "text": f"Amount ({currency_symbol})"},
                    "ticks": {},
                },
            },
            "interaction": {"mode": "nearest", "axis": "x", "intersect": False},
        },
    }
