"""End-to-end bucket summary runs over realistic scenario batches."""

from __future__ import annotations

import json
import re
from pathlib import Path

from planning_reports.pipeline.bucket_summary import BucketSummaryStage


def _run(app_config, payloads: list[dict], output_dir: Path) -> tuple[dict, str]:
    src = Path(app_config.paths.scenario_runs_file)
    src.write_text(json.dumps(payloads), encoding="utf-8")
    BucketSummaryStage(config=app_config).run(output_dir=output_dir)
    doc = json.loads((output_dir / "planning-bucket-summary.json").read_text(encoding="utf-8"))
    md = (output_dir / "planning-bucket-summary.md").read_text(encoding="utf-8")
    return doc, md


def test_six_scenarios_one_per_bucket(app_config, tmp_path, one_per_bucket_payloads):
    doc, md = _run(app_config, one_per_bucket_payloads, tmp_path / "out")

    assert set(doc["countsByBucket"].values()) == {1}
    assert [s["bucket"] for s in doc["summaries"]] == list(doc["countsByBucket"])
    assert not any(s["needsReview"] for s in doc["summaries"])

    assert len(re.findall(r"^- \*\*", md, flags=re.MULTILINE)) == 6
    assert "### Needs-review" not in md


def test_seventh_scenario_falls_back_to_bucket_7(
    app_config, tmp_path, one_per_bucket_payloads, unmatched_success_payload
):
    doc, md = _run(
        app_config, one_per_bucket_payloads + [unmatched_success_payload], tmp_path / "out"
    )

    assert doc["countsByBucket"]["bucket_7_sip_not_needed_corpus_only"] == 2
    assert sum(doc["countsByBucket"].values()) == 7
    fallback = doc["summaries"][-1]
    assert fallback["scenario"] == {"id": "fallback", "name": "Balanced success"}
    assert fallback["needsReview"] is True
    assert fallback["debug"] == {
        "corpusProfile": "balanced_corpus",
        "sipProfile": "sip_right_amount",
        "sipIsZero": False,
        "method1Met": False,
        "method2Met": True,
        "method3Met": False,
    }
    assert "### Needs-review" in md
    assert "(`fallback`) (needs-review)" in md


def test_rerun_is_idempotent(app_config, tmp_path, one_per_bucket_payloads):
    doc_a, md_a = _run(app_config, one_per_bucket_payloads, tmp_path / "a")
    doc_b, md_b = _run(app_config, one_per_bucket_payloads, tmp_path / "b")

    assert md_a == md_b
    doc_a.pop("generatedAt")
    doc_b.pop("generatedAt")
    assert json.dumps(doc_a, indent=2) == json.dumps(doc_b, indent=2)


def test_rerun_overwrites_previous_output(app_config, tmp_path, one_per_bucket_payloads):
    out = tmp_path / "out"
    _run(app_config, one_per_bucket_payloads, out)
    doc, _ = _run(app_config, one_per_bucket_payloads[:2], out)
    assert len(doc["summaries"]) == 2
