#!/usr/bin/env python3
"""
Matching Service - Ranks the candidate pool for one job posting.

Run stages:
1. fetch-posting: resolve the posting (PostingNotFound if it does not exist)
2. fetch-candidates: snapshot every applicant's resume
3. score-fan-out: score candidates in parallel on a bounded thread pool
4. persist-qualifying: record an application for every total >= 60
5. rank: sort by total score, highest first, ties in pool order

A malformed resume fails only that candidate; a failed application write
fails only that candidate's record. Both are reported in the run result.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Callable, ContextManager, List, Optional, Tuple
import logging

from core.config_loader import MatchingConfig
from core.exceptions import PostingNotFound
from core.matcher.dto import (
    CandidateFailure, CandidateRecordDTO, MatchingRunResult,
    STAGE_PERSISTENCE, STAGE_SCORING
)
from core.matcher.models import CandidateResume, JobPostingProfile
from core.scorer import ScoringService, MatchResult, is_qualifying
from core.scorer.persistence import save_application_to_db
from core.utils import Clock, system_clock
from database.repository import JobRepository
from database.uow import job_uow

logger = logging.getLogger(__name__)

UowFactory = Callable[[], ContextManager[JobRepository]]


def rank_matches(matches: List[MatchResult]) -> List[MatchResult]:
    """Sort by total score descending; equal scores keep their input order."""
    return sorted(matches, key=lambda m: m.total_score, reverse=True)


class MatchingService:
    """
    Orchestrates a matching run for one job posting.

    Scoring is pure and runs concurrently; persistence runs afterwards with
    one short unit of work per qualifying candidate, so a failed write rolls
    back nothing but its own record.
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        uow_factory: UowFactory = job_uow,
        scorer: Optional[ScoringService] = None,
        clock: Clock = system_clock
    ):
        self.config = config or MatchingConfig()
        self.uow_factory = uow_factory
        self.clock = clock
        self.scorer = scorer or ScoringService(clock=clock)

    def run_matching(self, job_id: str) -> MatchingRunResult:
        """Score every candidate against the posting and record qualifying applications.

        Args:
            job_id: Public identifier of the job post

        Returns:
            MatchingRunResult with the full ranked match list and any
            per-candidate failures

        Raises:
            PostingNotFound: job_id does not resolve to a posting
        """
        now = self.clock()

        job, candidates = self._load_inputs(job_id)
        logger.info(
            f"Matching job {job.job_id}: role={job.role!r}, skills={list(job.skills)}, "
            f"experience={job.experience!r}, location={job.location_mode!r}"
        )
        logger.info(f"Total number of applicants: {len(candidates)}")

        result = MatchingRunResult(job_id=job.job_id, candidates_total=len(candidates))

        scored = self._score_all(job, candidates, now, result)
        self._persist_qualifying(job, scored, result)
        result.matches = rank_matches(scored)

        self._log_summary(result)
        return result

    def _load_inputs(self, job_id: str) -> Tuple[JobPostingProfile, List[CandidateRecordDTO]]:
        with self.uow_factory() as repo:
            job_post = repo.get_posting(job_id)
            if job_post is None:
                logger.error(f"Job post not found: {job_id}")
                raise PostingNotFound(job_id)
            job = JobPostingProfile.from_orm(job_post)
            candidates = [CandidateRecordDTO.from_orm(a) for a in repo.get_all_candidates()]
        return job, candidates

    def score_candidate(
        self,
        job: JobPostingProfile,
        candidate: CandidateRecordDTO,
        now: datetime
    ) -> MatchResult:
        resume = CandidateResume.from_dict(candidate.candidate_id, candidate.resume)
        return self.scorer.score_candidate(job, resume, now)

    def _score_all(
        self,
        job: JobPostingProfile,
        candidates: List[CandidateRecordDTO],
        now: datetime,
        result: MatchingRunResult
    ) -> List[MatchResult]:
        """Fan out scoring, then fan in by walking futures in submission order."""
        if not candidates:
            return []

        max_workers = min(len(candidates), self.config.max_workers)
        scored: List[MatchResult] = []

        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="match-score") as pool:
            futures = [pool.submit(self.score_candidate, job, c, now) for c in candidates]

            for candidate, future in zip(candidates, futures):
                try:
                    scored.append(future.result())
                except Exception as e:
                    logger.warning(f"Scoring failed for applicant {candidate.candidate_id}: {e}")
                    result.failures.append(CandidateFailure(
                        candidate_id=candidate.candidate_id,
                        stage=STAGE_SCORING,
                        error=str(e),
                    ))

        return scored

    def _persist_qualifying(
        self,
        job: JobPostingProfile,
        scored: List[MatchResult],
        result: MatchingRunResult
    ) -> None:
        for match in scored:
            if not is_qualifying(match):
                continue
            try:
                with self.uow_factory() as repo:
                    if save_application_to_db(match, job.id, repo):
                        result.applications_created += 1
            except Exception as e:
                logger.error(f"Failed to save application for applicant {match.candidate_id}: {e}", exc_info=True)
                result.failures.append(CandidateFailure(
                    candidate_id=match.candidate_id,
                    stage=STAGE_PERSISTENCE,
                    error=str(e),
                ))

    def _log_summary(self, result: MatchingRunResult) -> None:
        top_n = self.config.log_top_n
        if top_n and result.matches:
            logger.info(f"Top {top_n} matches for job {result.job_id}:")
            for rank, match in enumerate(result.top(top_n), start=1):
                logger.info(
                    f"  #{rank} {match.name} <{match.email}> score={match.total_score} "
                    f"({match.recommendation.summary}) insights={match.recommendation.insights}"
                )

        logger.info(
            f"Matching complete for job {result.job_id}: {len(result.matches)}/{result.candidates_total} scored, "
            f"{len(result.qualifying)} qualifying, {result.applications_created} new applications"
        )

        if result.failures:
            logger.warning(f"{len(result.failures)} candidate(s) failed during matching for job {result.job_id}:")
            for failure in result.failures:
                logger.warning(f"  {failure.candidate_id} [{failure.stage}]: {failure.error}")
