"""
Networth graph stage: one projection file → one standalone HTML document.

The output path defaults to ``<graphs_dir>/<method>-networth.html``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from planning_reports.graphs.document import build_graph_document
from planning_reports.models.run import StageRun
from planning_reports.pipeline.base import PipelineStage
from planning_reports.reporting.export import export_to_text
from planning_reports.reporting.reader import load_projection

logger = logging.getLogger(__name__)


class NetworthGraphStage(PipelineStage):
    """Render one networth projection as an HTML graph document."""

    stage_name = "networth_graph"

    def _execute(
        self,
        run: StageRun,
        input_path: Optional[Path] = None,
        output_path: Optional[Path] = None,
        **kwargs,
    ) -> int:
        if input_path is None:
            raise ValueError("NetworthGraphStage requires input_path.")

        projection = load_projection(Path(input_path))
        if output_path is None:
            output_path = Path(self.config.paths.graphs_dir) / f"{projection.method}-networth.html"

        graph = self.config.graph
        html = build_graph_document(
            projection,
            chart_js_url=graph.chart_js_url,
            currency_symbol=graph.currency_symbol,
            chart_height_px=graph.chart_height_px,
        )
        written = export_to_text(html, Path(output_path))
        run.outputs.append(str(written))
        return 1
