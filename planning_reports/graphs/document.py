"""
Standalone HTML document for a networth projection.

The page loads the charting library from a CDN and embeds:
  - a "Planning Parameters" panel (initial corpus, monthly SIP, step-up, horizon),
  - the chart specification from ``chart.build_chart_config()`` as JSON,
  - a "Graph Components" legend,
  - a "Key Events" list of goal due dates and SIP step-ups (omitted when empty).

Goal due dates are listed even when their marker was omitted for falling
outside the trajectory; the list describes the plan, the chart only what
can be plotted.

All text taken from the input is HTML-escaped.  The JSON blob is embedded
with ``</`` escaped so it cannot close the surrounding ``<script>`` tag.
"""

from __future__ import annotations

import json
import logging
from html import escape

from planning_reports.graphs.chart import NETWORTH_LINE_COLOUR, build_chart_config
from planning_reports.graphs.labels import (
    DEFAULT_CURRENCY_SYMBOL,
    format_inr,
    format_percent,
    horizon_label,
    method_title,
)
from planning_reports.graphs.markers import build_goal_due_dates, find_step_up_months
from planning_reports.models.projection import NetworthProjectionData

logger = logging.getLogger(__name__)

DEFAULT_CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js@4.4.0/dist/chart.umd.min.js"

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Networth Projection - {title}</title>
<script src="{chart_js_url}"></script>
<style>
  body {{font-family: Arial, sans-serif; margin: 20px; background-color: #f5f5f5;}}
  .container {{max-width: 1200px; margin: 0 auto; background-color: white; padding: 20px;
              border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1);}}
  h1 {{color: #333; margin-bottom: 10px;}}
  .metadata {{background-color: #f9f9f9; padding: 15px; border-radius: 4px; margin-bottom: 20px;}}
  .metadata h2 {{margin-top: 0; font-size: 18px; color: #555;}}
  .metadata-grid {{display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 10px;}}
  .metadata-item {{padding: 8px;}}
  .metadata-label {{font-weight: bold; color: #666; font-size: 12px;}}
  .metadata-value {{color: #333; font-size: 16px; margin-top: 4px;}}
  .chart-container {{position: relative; height: {chart_height}px; margin-top: 20px;}}
  .legend {{margin-top: 20px; padding: 15px; background-color: #f9f9f9; border-radius: 4px;}}
  .legend h3 {{margin-top: 0; font-size: 16px; color: #555;}}
  .legend-item {{margin: 8px 0; display: flex; align-items: center;}}
  .legend-color {{width: 20px; height: 20px; margin-right: 10px; border-radius: 3px;}}
  .events-list {{margin-top: 20px; padding: 15px; background-color: #fff3cd; border-radius: 4px;
                border-left: 4px solid #ffc107;}}
  .events-list h3 {{margin-top: 0; font-size: 16px; color: #856404;}}
  .event-item {{margin: 5px 0; color: #856404;}}
</style>
</head>
<body>
<div class="container">
  <h1>Total Networth Projection - {title}</h1>

  <div class="metadata">
    <h2>Planning Parameters</h2>
    <div class="metadata-grid">
{metadata_items}
    </div>
  </div>

  <div class="chart-container">
    <canvas id="networthChart"></canvas>
  </div>

  <div class="legend">
    <h3>Graph Components</h3>
    <div class="legend-item">
      <div class="legend-color" style="background-color: {line_colour};"></div>
      <span><strong>Total Networth:</strong> Combined corpus value across all goals, accounting for growth, SIP contributions, and goal completions</span>
    </div>
  </div>
{events_section}
</div>

<script>
  const chartConfig = {chart_json};
  const monthLabels = chartConfig.data.labels;
  const currency = {currency_json};
  const formatAmount = (v) => currency + Number(v).toLocaleString('en-IN');

  chartConfig.options.scales.x.ticks.callback = function(value) {{
    const idx = Math.round(value);
    return (idx >= 0 && idx < monthLabels.length) ? monthLabels[idx] : value;
  }};
  chartConfig.options.scales.y.ticks.callback = function(value) {{
    return formatAmount(value);
  }};
  chartConfig.options.plugins.tooltip.callbacks = {{
    label: function(context) {{
      const label = context.dataset.label ? context.dataset.label + ': ' : '';
      return label + formatAmount(context.parsed.y);
    }}
  }};

  new Chart(document.getElementById('networthChart').getContext('2d'), chartConfig);
</script>
</body>
</html>
"""

_METADATA_ITEM = """      <div class="metadata-item">
        <div class="metadata-label">{label}</div>
        <div class="metadata-value">{value}</div>
      </div>"""


def _script_json(data: object) -> str:
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


def render_metadata_items(
    projection: NetworthProjectionData,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    meta = projection.metadata
    items = [
        ("Initial Total Corpus", format_inr(meta.initial_total_corpus, currency_symbol)),
        ("Total Monthly SIP", format_inr(meta.total_monthly_sip, currency_symbol)),
        ("Annual Step-Up", format_percent(meta.step_up_percent)),
        ("Projection Horizon", horizon_label(projection.max_month)),
    ]
    return "\n".join(
        _METADATA_ITEM.format(label=escape(label), value=escape(value)) for label, value in items
    )


def key_event_lines(projection: NetworthProjectionData) -> list[str]:
    """Plain-text key events: goal due dates first, then step-up months."""
    step_up = format_percent(projection.metadata.step_up_percent)
    lines = [
        f"Month {due.month}: {due.goal_name} due date - Basic tier corpus removed"
        for due in build_goal_due_dates(projection)
    ]
    lines.extend(
        f"Month {m}: SIP step-up applied ({step_up} increase)"
        for m in find_step_up_months(projection)
    )
    return lines


def render_events_section(projection: NetworthProjectionData) -> str:
    events = key_event_lines(projection)
    if not events:
        return ""
    items = []
    for line in events:
        head, _, rest = line.partition(":")
        items.append(
            f'    <div class="event-item"><strong>{escape(head)}:</strong>{escape(rest)}</div>'
        )
    return (
        '\n  <div class="events-list">\n'
        "    <h3>Key Events</h3>\n"
        + "\n".join(items)
        + "\n  </div>"
    )


def build_graph_document(
    projection: NetworthProjectionData,
    chart_js_url: str = DEFAULT_CHART_JS_URL,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    chart_height_px: int = 500,
) -> str:
    """Render the standalone HTML document for one projection.

    Args:
        projection:      Monthly networth trajectory and goal metadata.
        chart_js_url:    Script URL of the charting library.
        currency_symbol: Symbol prefixed to all amounts.
        chart_height_px: Chart canvas height.

    Returns:
        Complete HTML document as a string.
    """
    chart = build_chart_config(projection, currency_symbol=currency_symbol)
    logger.debug(
        "Chart for method=%s: %d month(s), %d goal marker(s)",
        projection.method, len(projection.monthly_values), len(chart["data"]["datasets"]) - 1,
    )
    return HTML_TEMPLATE.format(
        title=escape(method_title(projection.method)),
        chart_js_url=escape(chart_js_url, quote=True),
        chart_height=int(chart_height_px),
        metadata_items=render_metadata_items(projection, currency_symbol),
        line_colour=NETWORTH_LINE_COLOUR,
        events_section=render_events_section(projection),
        chart_json=_script_json(chart),
        currency_json=_script_json(currency_symbol),
    )
