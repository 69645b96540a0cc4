"""Shared matching pipeline runner module.

Used by the operator CLI, the in-process background dispatcher and the rq
worker, so a run behaves and logs the same way wherever it executes.
"""

import os
import time
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.app_context import AppContext
from core.config_loader import load_config
from core.exceptions import MatchingError
from core.matcher.dto import MatchingRunResult

logger = logging.getLogger(__name__)


@dataclass
class MatchingPipelineResult:
    """Result of running the matching pipeline for one job post."""
    success: bool
    job_id: str
    run: Optional[MatchingRunResult] = None
    error: Optional[str] = None
    execution_time: float = 0.0

    @property
    def matches_count(self) -> int:
        return len(self.run.matches) if self.run else 0

    @property
    def saved_count(self) -> int:
        return self.run.applications_created if self.run else 0


def run_matching_pipeline(ctx: AppContext, job_id: str) -> MatchingPipelineResult:
    """Run matching for one job post and report the outcome instead of raising.

    Args:
        ctx: Application context with config and matching service
        job_id: Public identifier of the job post

    Returns:
        MatchingPipelineResult with success status, the run result and timing
    """
    start = time.time()

    logger.info("=" * 60)
    logger.info(f"STARTING MATCHING PIPELINE for job {job_id}")
    logger.info("=" * 60)

    try:
        run = ctx.matching_service.run_matching(job_id)
    except MatchingError as e:
        logger.error(f"Matching pipeline failed for job {job_id}: {e}")
        return MatchingPipelineResult(
            success=False, job_id=job_id, error=str(e), execution_time=time.time() - start
        )
    except Exception as e:
        logger.exception(f"Unexpected error in matching pipeline for job {job_id}")
        return MatchingPipelineResult(
            success=False, job_id=job_id, error=str(e), execution_time=time.time() - start
        )

    elapsed = time.time() - start
    logger.info(
        f"=== MATCHING PIPELINE COMPLETE: {len(run.matches)} matches, "
        f"{run.applications_created} saved in {elapsed:.2f}s ==="
    )
    return MatchingPipelineResult(success=True, job_id=job_id, run=run, execution_time=elapsed)


def run_matching_task(job_id: str, config_path: Optional[str] = None) -> Dict[str, Any]:
    """Entry point executed by rq workers.

    Builds its own context from config so it can run in a separate process.
    Raises on failure so rq records the job as failed (and retries it).
    """
    config = load_config(config_path or os.environ.get("CONFIG_PATH", "config.yaml"))
    ctx = AppContext.build(config)

    result = run_matching_pipeline(ctx, job_id)
    if not result.success:
        raise MatchingError(f"Matching failed for job {job_id}: {result.error}")
    return result.run.summary()
