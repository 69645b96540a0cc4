#!/usr/bin/env python3
"""
Persistence Operations - Application records for qualifying matches.

An application record is created at most once per (posting, candidate) pair.
The write is a single INSERT ... ON CONFLICT DO NOTHING keyed on that pair,
so repeated or concurrent matching runs for the same posting cannot create
duplicates. Transient database errors (lock timeouts, dropped connections)
are retried before the failure is reported to the caller.
"""

import logging

from sqlalchemy.exc import OperationalError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed

from core.scorer.models import MatchResult

logger = logging.getLogger(__name__)

UPSERT_ATTEMPTS = 3
UPSERT_WAIT_SECONDS = 0.5


@retry(
    retry=retry_if_exception_type(OperationalError),
    stop=stop_after_attempt(UPSERT_ATTEMPTS),
    wait=wait_fixed(UPSERT_WAIT_SECONDS),
    reraise=True,
)
def _upsert_with_retry(repo, job_post_id, job_applicant_id, match_score: int) -> bool:
    try:
        return repo.upsert_application(job_post_id, job_applicant_id, match_score)
    except OperationalError:
        repo.rollback()
        raise


def save_application_to_db(match: MatchResult, job_post_id, repo) -> bool:
    """
    Record an application for a qualifying match.

    Args:
        match: Scored match (caller has already checked it qualifies)
        job_post_id: Primary key of the job post
        repo: JobRepository bound to the current unit of work

    Returns:
        True if a new application record was created, False if one already existed
    """
    created = _upsert_with_retry(repo, job_post_id, match.candidate_id, match.total_score)

    if created:
        logger.info(f"Applicant {match.candidate_id} applied for job {job_post_id} (score={match.total_score})")
    else:
        logger.debug(f"Application for applicant {match.candidate_id} on job {job_post_id} already exists")

    return created
