#!/usr/bin/env python3
"""
Scoring Service - Multi-factor score of one candidate against one posting.

Combines five component scores:
- Skills match (35%)
- Experience match (25%)
- Location match (15%)
- Role/text similarity (15%)
- Education relevance (10%)

Scoring is pure: it reads the posting and the resume, never mutates them and
touches no shared state, so it is safe to run from many threads at once.
"""

from datetime import datetime
from typing import Optional
import logging

from core.matcher.models import CandidateResume, JobPostingProfile, normalize_resume
from core.scorer.models import ComponentScores, MatchResult
from core.scorer import aggregate
from core.scorer.education import calculate_education_relevance
from core.scorer.experience import calculate_experience_match
from core.scorer.location import calculate_location_match
from core.scorer.recommendation import generate_recommendation
from core.scorer.skills import calculate_skills_match
from core.scorer.text_similarity import calculate_text_similarity
from core.utils import Clock, system_clock

logger = logging.getLogger(__name__)

# Candidates at or above this total get an application record.
QUALIFYING_SCORE = 60


def is_qualifying(match: MatchResult) -> bool:
    return match.total_score >= QUALIFYING_SCORE


class ScoringService:
    """
    Scores candidates against a job posting.

    The clock closes ongoing experience entries; inject a fixed clock for
    reproducible scores.
    """

    def __init__(self, clock: Clock = system_clock):
        self.clock = clock

    def score_components(
        self,
        job: JobPostingProfile,
        resume: CandidateResume,
        now: datetime
    ) -> ComponentScores:
        """Compute the five raw component scores. Expects a normalized resume."""
        return ComponentScores(
            skills=calculate_skills_match(job.skills, resume.skills),
            experience=calculate_experience_match(job.experience, resume.experience, now),
            location=calculate_location_match(job, resume.personal),
            text_similarity=calculate_text_similarity(job.text, resume.text),
            education=calculate_education_relevance(job.role, resume.education),
        )

    def score_candidate(
        self,
        job: JobPostingProfile,
        resume: CandidateResume,
        now: Optional[datetime] = None
    ) -> MatchResult:
        """Calculate the full match result for one candidate.

        Args:
            job: Posting being matched
            resume: Candidate resume as stored; normalized internally
            now: Evaluation instant; defaults to the service clock

        Returns:
            MatchResult with total score, rounded breakdown and recommendation

        Raises:
            CandidateDataError: the resume has malformed experience dates
        """
        now = now or self.clock()
        resume = normalize_resume(resume)

        components = self.score_components(job, resume, now)
        total_score = aggregate.calculate_total_score(components)
        breakdown = aggregate.build_breakdown(components)

        result = MatchResult(
            candidate_id=resume.candidate_id,
            name=resume.personal.full_name,
            email=resume.personal.email,
            total_score=total_score,
            breakdown=breakdown,
            recommendation=generate_recommendation(total_score, breakdown),
        )

        logger.debug(f"Candidate {resume.candidate_id}: total={total_score}, details={breakdown.to_dict()}")
        return result
