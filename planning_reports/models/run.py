"""
Pipeline stage run record.

``StageRun`` is the in-memory audit record of one stage execution.  It is
the only model in the package that is NOT frozen: ``status``,
``rows_processed``, ``outputs``, ``error_message`` and ``finished_at`` are
updated as the stage progresses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

VALID_STAGES = frozenset({"bucket_summary", "networth_graph"})
VALID_RUN_STATUSES = frozenset({"started", "success", "failed"})


class StageRun(BaseModel):
    """Execution record for one pipeline stage run.

    Attributes:
        run_slug:        UUID4 string uniquely identifying this run.
        stage:           Which stage produced this record.
        status:          Current execution status.
        config_snapshot: Full ``AppConfig.model_dump()`` at run start.
        rows_processed:  Number of scenarios / documents processed.
        outputs:         Paths written by the stage, in write order.
        error_message:   Error description if ``status == "failed"``.
        started_at:      UTC datetime when the run began.
        finished_at:     UTC datetime when the run completed or failed.
    """

    model_config = ConfigDict(frozen=False)

    run_slug: str
    stage: str
    status: str = "started"
    config_snapshot: dict[str, Any]
    rows_processed: int = 0
    outputs: list[str] = []
    error_message: Optional[str] = None
    started_at: datetime
    finished_at: Optional[datetime] = None

    @field_validator("stage")
    @classmethod
    def validate_stage(cls, v: str) -> str:
        if v not in VALID_STAGES:
            raise ValueError(f"Unknown stage '{v}'. Must be one of {sorted(VALID_STAGES)}.")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        if v not in VALID_RUN_STATUSES:
            raise ValueError(
                f"Unknown status '{v}'. Must be one of {sorted(VALID_RUN_STATUSES)}."
            )
        return v
