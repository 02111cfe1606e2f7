"""
planning_reports.reporting — reading inputs and rendering bucket summary reports.

This package formats decisions made upstream by the classifier; it makes no
classification decisions of its own.

Modules:
  reader     — Load and validate scenario-run and projection JSON inputs.
  markdown   — Markdown bucket summary document.
  export     — JSON document shape and flat-file writers.
  formatters — Plain-text console summaries for Typer CLI commands.
"""
