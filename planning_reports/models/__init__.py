"""
Pydantic v2 data models.

  scenario   — multi-method scenario run results read from the projection engine.
  bucket     — classification and per-scenario summary outputs.
  projection — monthly networth trajectory consumed by the graph builder.
  run        — pipeline stage run record.
"""
