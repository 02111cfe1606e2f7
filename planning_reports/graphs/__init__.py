"""
planning_reports.graphs — month-by-month networth projection documents.

  labels   — time-axis labels, horizon text, currency formatting.
  markers  — goal due-date markers (three-tier colouring) and step-up months.
  chart    — declarative chart specification (pure dict).
  document — standalone HTML document embedding the chart specification.

Everything here is a pure transform of ``NetworthProjectionData``; writing
the document to disk is the pipeline stage's job.
"""

from planning_reports.graphs.document import build_graph_document

__all__ = ["build_graph_document"]
