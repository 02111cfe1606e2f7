"""
Application configuration management.

Load order (each layer overrides the previous):
  1. Built-in model defaults
  2. ``config/default.toml``      — committed static defaults
  3. ``config/local.toml``        — optional local overrides (gitignored)
  4. ``.env``                     — local env overrides (gitignored)
  5. Environment variables        — ``PLANNING_REPORTS_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

All pipeline stages and CLI commands receive an ``AppConfig`` instance,
never raw dicts or individual env var lookups scattered through the codebase.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class PathsConfig(BaseModel):
    """Input and output locations for the report drivers."""

    model_config = ConfigDict(frozen=True)

    scenario_runs_file: str = "docs/planning-test-scenarios-output.json"
    output_dir: str = "docs"
    summary_json_name: str = "planning-bucket-summary.json"
    summary_md_name: str = "planning-bucket-summary.md"
    graphs_dir: str = "graphs"

    @field_validator("summary_json_name", "summary_md_name")
    @classmethod
    def plain_file_name(cls, v: str) -> str:
        if not v or Path(v).name != v:
            raise ValueError(f"Output file name must be a bare file name, got '{v}'.")
        return v


class GraphConfig(BaseModel):
    """Projection graph rendering settings."""

    model_config = ConfigDict(frozen=True)

    chart_js_url: str = "https://cdn.jsdelivr.net/npm/chart.js@4.4.0/dist/chart.umd.min.js"
    currency_symbol: str = "₹"
    chart_height_px: int = 500

    @field_validator("chart_height_px")
    @classmethod
    def positive_height(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"chart_height_px must be > 0, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth."""

    model_config = ConfigDict(frozen=True)

    paths: PathsConfig = PathsConfig()
    graph: GraphConfig = GraphConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file.  Defaults to
            ``<project_root>/config/default.toml``; if that default file does
            not exist, built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        tomllib.TOMLDecodeError: If a config file is not valid TOML.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    load_dotenv(dotenv_path=root / ".env", override=False)

    raw: dict[str, Any] = {}
    if config_path is None:
        config_path = root / "config" / "default.toml"
        explicit = False
    else:
        config_path = Path(config_path)
        explicit = True

    if config_path.exists():
        with open(config_path, "rb") as f:
            raw = tomllib.load(f)
        local_config_path = config_path.parent / "local.toml"
        if local_config_path.exists():
            with open(local_config_path, "rb") as f:
                raw = _deep_merge(raw, tomllib.load(f))
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    raw = _apply_env_overrides(raw)
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply PLANNING_REPORTS_* env vars to the raw config dict.

    Supported overrides:
      PLANNING_REPORTS_OUTPUT_DIR  → raw["paths"]["output_dir"]
      PLANNING_REPORTS_LOG_LEVEL   → raw["logging"]["level"]
      PLANNING_REPORTS_DEBUG       → raw["debug"]
    """
    if output_dir := os.environ.get("PLANNING_REPORTS_OUTPUT_DIR"):
        raw.setdefault("paths", {})["output_dir"] = output_dir

    if log_level := os.environ.get("PLANNING_REPORTS_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("PLANNING_REPORTS_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.get("project", {})

    return AppConfig(
        paths=PathsConfig(**raw.get("paths", {})),
        graph=GraphConfig(**raw.get("graph", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
