"""
Planning Reports — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Run one pipeline stage.
  4. Report the result to stdout (errors to stderr, exit code 1).

Install and run::

    pip install -e .
    planning-reports --help
    planning-reports validate-config
    planning-reports bucket-summary --input docs/planning-test-scenarios-output.json
    planning-reports networth-graph --input method1-basic-projection.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from planning_reports.errors import PlanningReportsError

app = typer.Typer(
    name="planning-reports",
    help="Bucket classification and networth projection reports for goal-planning scenarios.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from planning_reports.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from planning_reports.utils.logging import configure_logging
    configure_logging(config.logging)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Scenario runs file: {config.paths.scenario_runs_file}")
    typer.echo(f"  Output dir:         {config.paths.output_dir}")
    typer.echo(f"  Graphs dir:         {config.paths.graphs_dir}")
    typer.echo(f"  Log level:          {config.logging.level}")
    typer.echo(f"  Debug mode:         {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, ensure_ascii=False, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("bucket-summary")
def bucket_summary(
    input_file: Optional[str] = typer.Option(
        None,
        "--input",
        "-i",
        help="Scenario runs JSON file. Defaults to config.paths.scenario_runs_file.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the JSON and Markdown summaries. Defaults to config.paths.output_dir.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Classify scenario runs into buckets and write JSON + Markdown summaries.

    \b
    Buckets (display order):
      7    SIP not needed; corpus alone meets basic goals
      4    skewed corpus; method 1 or 2 meets basic goals
      5    skewed corpus; only method 3 (rebalancing) meets basic goals
      3    skewed corpus; no method meets basic goals
      6    balanced corpus; no method meets basic goals
      1/2  corpus or SIP too low; no method meets basic goals
    """
    from planning_reports.pipeline.bucket_summary import BucketSummaryStage
    from planning_reports.reporting.formatters import (
        format_bucket_coverage,
        format_needs_review,
        format_written_paths,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    stage = BucketSummaryStage(config=config)
    try:
        run = stage.run(
            input_path=Path(input_file) if input_file else None,
            output_dir=Path(output_dir) if output_dir else None,
        )
    except (PlanningReportsError, OSError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    result = stage.result
    typer.echo(format_bucket_coverage(result.counts_by_bucket))
    review = format_needs_review(result.summaries)
    if review:
        typer.echo("")
        typer.echo(review)
    typer.echo("")
    typer.echo(format_written_paths(run.outputs))
    typer.echo(f"[OK] Classified {run.rows_processed} scenario(s).")


@app.command("networth-graph")
def networth_graph(
    input_file: str = typer.Option(
        ...,
        "--input",
        "-i",
        help="Networth projection JSON file (one scenario, one method).",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="HTML output path. Defaults to <graphs_dir>/<method>-networth.html.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Render a networth projection as a standalone HTML chart document."""
    from planning_reports.pipeline.networth_graph import NetworthGraphStage
    from planning_reports.reporting.formatters import format_written_paths

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        run = NetworthGraphStage(config=config).run(
            input_path=Path(input_file),
            output_path=Path(output_file) if output_file else None,
        )
    except (PlanningReportsError, OSError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_written_paths(run.outputs))
    typer.echo("[OK] Graph generated.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
