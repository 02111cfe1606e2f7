"""Tests for config.py — TOML loading, local overrides and env overrides."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from planning_reports.config import AppConfig, GraphConfig, LoggingConfig, PathsConfig, load_config

_ENV_VARS = ("PLANNING_REPORTS_OUTPUT_DIR", "PLANNING_REPORTS_LOG_LEVEL", "PLANNING_REPORTS_DEBUG")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _write_toml(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_default_toml_loads(self):
        config = load_config()
        assert isinstance(config, AppConfig)
        assert config.paths.summary_md_name == "planning-bucket-summary.md"
        assert config.graph.currency_symbol == "₹"

    def test_explicit_file(self, tmp_path):
        path = _write_toml(
            tmp_path / "cfg" / "app.toml",
            '[paths]\noutput_dir = "reports"\n\n[logging]\nlevel = "debug"\n',
        )
        config = load_config(path)
        assert config.paths.output_dir == "reports"
        assert config.logging.level == "DEBUG"
        assert config.graph.chart_height_px == 500

    def test_local_toml_is_merged(self, tmp_path):
        path = _write_toml(
            tmp_path / "app.toml",
            '[graph]\ncurrency_symbol = "Rs"\nchart_height_px = 400\n',
        )
        _write_toml(tmp_path / "local.toml", "[graph]\nchart_height_px = 650\n")
        config = load_config(path)
        assert config.graph.currency_symbol == "Rs"
        assert config.graph.chart_height_px == 650

    def test_missing_explicit_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = _write_toml(tmp_path / "app.toml", '[paths]\noutput_dir = "docs"\n')
        monkeypatch.setenv("PLANNING_REPORTS_OUTPUT_DIR", "/tmp/elsewhere")
        monkeypatch.setenv("PLANNING_REPORTS_LOG_LEVEL", "warning")
        monkeypatch.setenv("PLANNING_REPORTS_DEBUG", "true")
        config = load_config(path)
        assert config.paths.output_dir == "/tmp/elsewhere"
        assert config.logging.level == "WARNING"
        assert config.debug is True

    def test_project_debug_flag(self, tmp_path):
        path = _write_toml(tmp_path / "app.toml", "[project]\ndebug = true\n")
        assert load_config(path).debug is True

    def test_invalid_level_rejected(self, tmp_path):
        path = _write_toml(tmp_path / "app.toml", '[logging]\nlevel = "LOUD"\n')
        with pytest.raises(ValidationError):
            load_config(path)


class TestConfigModels:
    def test_defaults(self):
        config = AppConfig()
        assert config.paths.output_dir == "docs"
        assert config.logging.log_file == ""
        assert config.debug is False

    def test_output_names_must_be_bare(self):
        with pytest.raises(ValidationError):
            PathsConfig(summary_json_name="nested/summary.json")

    def test_chart_height_positive(self):
        with pytest.raises(ValidationError):
            GraphConfig(chart_height_px=0)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            LoggingConfig().level = "DEBUG"  # type: ignore[misc]
