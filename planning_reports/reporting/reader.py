"""
Input readers: load and validate projection-engine JSON files.

Every reader either returns fully validated models or raises
``ReportInputError``.  Callers validate the whole input before writing
anything, so a malformed file never leaves partial output behind.

Failure modes mapped to ``ReportInputError``:
  - file missing or unreadable (``OSError``)
  - invalid JSON (``json.JSONDecodeError``)
  - wrong top-level shape (e.g. an object where an array is expected)
  - schema validation failure (``pydantic.ValidationError``)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from planning_reports.errors import ReportInputError
from planning_reports.models.projection import NetworthProjectionData
from planning_reports.models.scenario import ScenarioRunResult

logger = logging.getLogger(__name__)

_RUNS_ADAPTER = TypeAdapter(list[ScenarioRunResult])


def load_json(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        ReportInputError: If the file cannot be read or is not valid JSON.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReportInputError(path, f"unreadable ({exc.strerror or exc})") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ReportInputError(
            path, f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
        ) from exc


def _first_errors(exc: ValidationError, limit: int = 3) -> str:
    parts = []
    for err in exc.errors()[:limit]:
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}")
    more = exc.error_count() - limit
    if more > 0:
        parts.append(f"... and {more} more")
    return "; ".join(parts)


def load_scenario_runs(path: Path) -> list[ScenarioRunResult]:
    """Load a scenario-runs file (a JSON array of scenario run results).

    Args:
        path: Path to the projection engine's scenario output file.

    Returns:
        Validated ``ScenarioRunResult`` list, in file order.

    Raises:
        ReportInputError: On any read, parse, shape, or validation failure.
    """
    data = load_json(path)
    if not isinstance(data, list):
        raise ReportInputError(path, "expected a JSON array of scenario run results")
    try:
        runs = _RUNS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise ReportInputError(path, f"schema validation failed: {_first_errors(exc)}") from exc
    logger.info("Loaded %d scenario run(s) from %s", len(runs), path)
    return runs


def load_projection(path: Path) -> NetworthProjectionData:
    """Load one networth projection JSON object.

    Raises:
        ReportInputError: On any read, parse, shape, or validation failure.
    """
    data = load_json(path)
    if not isinstance(data, dict):
        raise ReportInputError(path, "expected a JSON object with monthlyValues and metadata")
    try:
        projection = NetworthProjectionData.model_validate(data)
    except ValidationError as exc:
        raise ReportInputError(path, f"schema validation failed: {_first_errors(exc)}") from exc
    logger.info(
        "Loaded projection method=%s months=%d goals=%d from %s",
        projection.method, len(projection.monthly_values),
        len(projection.metadata.goals), path,
    )
    return projection
