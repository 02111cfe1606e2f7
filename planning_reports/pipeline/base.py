"""
Abstract base class for pipeline stages.

Every stage follows the same contract:
  1. Receive ``AppConfig`` at construction.
  2. ``run(**kwargs)`` is the sole public API.
  3. ``run()`` creates a ``StageRun`` record, calls ``_execute()``, and
     returns the record with its final status.
  4. ``_execute()`` is the stage-specific implementation (overridden by subclasses).

Failures are logged, recorded on the run, and re-raised.  Nothing is retried:
the stages are stateless and idempotent, so re-running after fixing the input
fully recovers.

Usage::

    class MyStage(PipelineStage):
        stage_name = "bucket_summary"

        def _execute(self, run: StageRun, **kwargs) -> int:
            run.outputs.append("docs/out.md")
            return 42

    result = MyStage(config=app_config).run(input_path=Path("runs.json"))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from uuid import uuid4

from planning_reports.config import AppConfig
from planning_reports.models.run import StageRun
from planning_reports.utils.time_utils import utcnow

logger = logging.getLogger(__name__)


class PipelineStage(ABC):
    """Abstract base for all pipeline stages.

    Subclasses must:
      1. Set the ``stage_name`` class variable.
      2. Implement ``_execute(run, **kwargs) -> int``.
    """

    stage_name: str  # Override in subclass

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run(self, **kwargs) -> StageRun:
        """Execute this pipeline stage.

        Args:
            **kwargs: Stage-specific keyword arguments passed to ``_execute()``.

        Returns:
            ``StageRun`` with ``status='success'``, ``rows_processed``,
            ``outputs`` and ``finished_at`` set.

        Raises:
            Exception: Re-raises any exception from ``_execute()`` after
                recording ``status='failed'`` on the run.
        """
        run = StageRun(
            run_slug=str(uuid4()),
            stage=self.stage_name,
            config_snapshot=self.config.model_dump(),
            started_at=utcnow(),
        )
        logger.info("Stage [%s] starting | run_slug=%s", self.stage_name, run.run_slug)

        try:
            rows = self._execute(run=run, **kwargs)
        except Exception as exc:
            run.status = "failed"
            run.error_message = str(exc)
            run.finished_at = utcnow()
            logger.error(
                "Stage [%s] FAILED: %s | run_slug=%s",
                self.stage_name, exc, run.run_slug,
            )
            raise

        run.status = "success"
        run.rows_processed = rows
        run.finished_at = utcnow()
        logger.info(
            "Stage [%s] completed | rows=%d | outputs=%d | run_slug=%s",
            self.stage_name, rows, len(run.outputs), run.run_slug,
        )
        return run

    @abstractmethod
    def _execute(self, run: StageRun, **kwargs) -> int:
        """Stage-specific implementation.

        Args:
            run: The in-progress ``StageRun`` record (mutable).
            **kwargs: Stage-specific parameters.

        Returns:
            Integer count of records processed.
        """
        ...
