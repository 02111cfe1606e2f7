"""
Bucket summary stage: scenario runs → JSON + Markdown summary documents.

Steps:
  1. Load and validate every scenario run (fails before any write).
  2. Classify and summarise (``classification.build_summaries``).
  3. Render both documents in memory.
  4. Write ``<output_dir>/<summary_json_name>`` then ``<summary_md_name>``.

The built ``BucketSummaryResult`` is kept on ``self.result`` so the CLI can
print bucket coverage without re-reading the files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from planning_reports.classification.summary import build_summaries
from planning_reports.models.bucket import BucketSummaryResult
from planning_reports.models.run import StageRun
from planning_reports.pipeline.base import PipelineStage
from planning_reports.reporting.export import export_to_json, export_to_text, to_json_document
from planning_reports.reporting.markdown import render_bucket_markdown
from planning_reports.reporting.reader import load_scenario_runs
from planning_reports.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


class BucketSummaryStage(PipelineStage):
    """Classify a batch of scenario runs and write the bucket summary."""

    stage_name = "bucket_summary"

    result: Optional[BucketSummaryResult] = None

    def _execute(
        self,
        run: StageRun,
        input_path: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        **kwargs,
    ) -> int:
        paths = self.config.paths
        input_path = Path(input_path or paths.scenario_runs_file)
        output_dir = Path(output_dir or paths.output_dir)

        runs = load_scenario_runs(input_path)
        result = build_summaries(runs)

        document = to_json_document(result.summaries, result.counts_by_bucket, utcnow())
        markdown = render_bucket_markdown(result.summaries, result.counts_by_bucket)

        json_path = export_to_json(document, output_dir / paths.summary_json_name)
        md_path = export_to_text(markdown, output_dir / paths.summary_md_name)
        run.outputs.extend([str(json_path), str(md_path)])

        self.result = result
        return len(result.summaries)
