#!/usr/bin/env python3
"""
Unit tests for ScoringService - no database required.
"""

import math
import unittest
from dataclasses import replace

from core.exceptions import CandidateDataError
from core.matcher.models import CandidateResume, JobPostingProfile
from core.scorer import QUALIFYING_SCORE, ScoringService, is_qualifying
from core.scorer.models import RecommendationTier
from core.utils import round_half_up
from tests import FIXED_NOW, fixed_clock, go_kubernetes_posting_fields, golang_candidate_resume, make_resume_dict


def go_posting() -> JobPostingProfile:
    fields = go_kubernetes_posting_fields()
    return JobPostingProfile(
        id="post-1",
        job_id=fields["job_id"],
        role=fields["job_role"],
        description=fields["job_description"],
        skills=tuple(fields["skills"]),
        experience=fields["experience"],
        location_mode=fields["job_location"],
    )


class TestScoringService(unittest.TestCase):

    def setUp(self):
        self.scorer = ScoringService(clock=fixed_clock)
        self.job = go_posting()

    def test_01_go_kubernetes_scenario(self):
        """Golang/Docker candidate against a remote Go/Kubernetes posting."""
        print("\n🧪 UNIT Test 1: Go/Kubernetes end-to-end scoring")

        resume = CandidateResume.from_dict("cand-1", golang_candidate_resume())
        result = self.scorer.score_candidate(self.job, resume)

        # 03/2021 -> 2024-01-01 is ~2.84 years, inside the 2-4 bucket
        idf = 1 + math.log(2 / 3)
        similarity = (4 * idf * idf) / (10 * 0.5) * 100
        expected_total = round_half_up(50 * 0.35 + 100 * 0.25 + 100 * 0.15 + similarity * 0.15 + 50 * 0.10)

        self.assertEqual(result.breakdown.skills_match, 50)
        self.assertEqual(result.breakdown.experience_match, 100)
        self.assertEqual(result.breakdown.location_match, 100)
        self.assertEqual(result.breakdown.role_similarity, 28)
        self.assertEqual(result.breakdown.education_relevance, 50)
        self.assertEqual(result.total_score, expected_total)
        self.assertEqual(result.total_score, 67)
        self.assertTrue(is_qualifying(result))
        self.assertEqual(result.recommendation.tier, RecommendationTier.POTENTIAL)
        self.assertEqual(result.name, "Gopher Smith")
        self.assertEqual(result.email, "gopher@example.com")

        print(f"   ✓ total={result.total_score} details={result.breakdown.to_dict()}")

    def test_02_deterministic_with_fixed_clock(self):
        resume = CandidateResume.from_dict("cand-1", golang_candidate_resume())

        first = self.scorer.score_candidate(self.job, resume)
        second = self.scorer.score_candidate(self.job, resume, FIXED_NOW)

        self.assertEqual(first, second)

    def test_03_scores_within_bounds(self):
        resumes = [
            make_resume_dict(),
            golang_candidate_resume(),
            make_resume_dict(
                skills=["Go", "Kubernetes", "Golang"],
                summary="Backend Engineer Build services with Go and Kubernetes " * 5,
                experience=[{"role": "Backend Engineer", "description": "Go", "startDate": "01/2000", "endDate": "Present"}],
                education=[{"degree": "Backend Engineer"}],
            ),
        ]
        for i, data in enumerate(resumes):
            result = self.scorer.score_candidate(self.job, CandidateResume.from_dict(f"cand-{i}", data))
            self.assertGreaterEqual(result.total_score, 0)
            self.assertLessEqual(result.total_score, 100)
            for value in result.breakdown.to_dict().values():
                self.assertGreaterEqual(value, 0)
                self.assertLessEqual(value, 100)

    def test_04_missing_location_is_not_an_error(self):
        onsite = replace(self.job, location_mode="onsite", country="Germany", city="Berlin")
        resume = CandidateResume.from_dict("cand-1", golang_candidate_resume())
        self.assertIsNone(resume.personal.country)

        result = self.scorer.score_candidate(onsite, resume)

        self.assertEqual(result.breakdown.location_match, 0)
        self.assertIsNone(resume.personal.country)
        self.assertIsNone(resume.personal.city)

    def test_05_malformed_experience_raises(self):
        data = make_resume_dict(experience=[{"role": "Dev", "description": "", "startDate": "soon", "endDate": "Present"}])
        resume = CandidateResume.from_dict("cand-1", data)

        with self.assertRaises(CandidateDataError):
            self.scorer.score_candidate(self.job, resume)

    def test_06_qualifying_threshold(self):
        self.assertEqual(QUALIFYING_SCORE, 60)


if __name__ == '__main__':
    unittest.main()
