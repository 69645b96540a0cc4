#!/usr/bin/env python3
"""
End-to-end matching against a file-backed SQLite database.

Covers the full run: posting lookup, candidate fetch, parallel scoring,
application upsert and ranking, including repeated and concurrent runs for
the same posting.
"""

import threading
import unittest

import pytest
from sqlalchemy import func, select

from core.config_loader import MatchingConfig
from core.exceptions import PostingNotFound
from core.matcher.service import MatchingService
from database.models import JobApplicant, JobApplication, JobPost
from tests import SQLiteTestDatabase, fixed_clock, go_kubernetes_posting_fields, golang_candidate_resume, make_resume_dict


def seed(db: SQLiteTestDatabase):
    """Posting plus three applicants: one strong, one borderline-qualifying, one weak."""
    with db.uow() as repo:
        repo.db.add(JobPost(**go_kubernetes_posting_fields()))
        repo.db.add_all([
            JobApplicant(email="gopher@example.com", resume=golang_candidate_resume()),
            JobApplicant(email="strong@example.com", resume=make_resume_dict(
                first_name="Kube",
                last_name="Expert",
                email="strong@example.com",
                skills=["Go", "Kubernetes"],
                summary="Backend Engineer building Go and Kubernetes services",
                experience=[{"role": "Backend Engineer", "description": "Go services on Kubernetes",
                             "startDate": "06/2020", "endDate": "Present"}],
                education=[{"degree": "MSc Backend Engineer"}],
            )),
            JobApplicant(email="painter@example.com", resume=make_resume_dict(
                first_name="Bob",
                last_name="Ross",
                email="painter@example.com",
                skills=["Painting"],
                summary="Happy little trees",
            )),
        ])


@pytest.mark.db
@pytest.mark.integration
class TestMatchingEndToEnd(unittest.TestCase):

    def setUp(self):
        self.db = SQLiteTestDatabase()
        seed(self.db)
        self.service = MatchingService(
            MatchingConfig(max_workers=4, log_top_n=5),
            uow_factory=self.db.uow,
            clock=fixed_clock,
        )

    def tearDown(self):
        self.db.close()

    def application_rows(self):
        with self.db.uow() as repo:
            rows = repo.db.execute(
                select(JobApplicant.email, JobApplication.match_score)
                .join(JobApplication, JobApplication.job_applicant_id == JobApplicant.id)
            ).all()
            return {email: score for email, score in rows}

    def application_count(self):
        with self.db.uow() as repo:
            return repo.db.execute(select(func.count()).select_from(JobApplication)).scalar_one()

    def test_01_full_run(self):
        print("\n🔄 INTEGRATION Test 1: Full matching run")
        result = self.service.run_matching("job-go-k8s")

        emails = [m.email for m in result.matches]
        self.assertEqual(emails, ["strong@example.com", "gopher@example.com", "painter@example.com"])
        self.assertEqual(result.failures, [])
        self.assertEqual(result.applications_created, 2)

        gopher = result.matches[1]
        self.assertEqual(gopher.total_score, 67)
        self.assertEqual(gopher.breakdown.skills_match, 50)
        self.assertEqual(gopher.breakdown.experience_match, 100)
        self.assertEqual(gopher.breakdown.location_match, 100)
        self.assertEqual(gopher.breakdown.education_relevance, 50)

        rows = self.application_rows()
        self.assertEqual(set(rows), {"strong@example.com", "gopher@example.com"})
        self.assertEqual(rows["gopher@example.com"], 67)
        self.assertEqual(rows["strong@example.com"], result.matches[0].total_score)

        for match in result.matches:
            print(f"   {match.name}: {match.total_score} ({match.recommendation.summary})")

    def test_02_sequential_runs_are_idempotent(self):
        print("\n🔄 INTEGRATION Test 2: Sequential runs")
        first = self.service.run_matching("job-go-k8s")
        second = self.service.run_matching("job-go-k8s")

        self.assertEqual(first.applications_created, 2)
        self.assertEqual(second.applications_created, 0)
        self.assertEqual([m.total_score for m in first.matches], [m.total_score for m in second.matches])
        self.assertEqual(self.application_count(), 2)

    def test_03_concurrent_runs_are_idempotent(self):
        print("\n🔄 INTEGRATION Test 3: Concurrent runs")
        results = []
        errors = []
        lock = threading.Lock()

        def run():
            try:
                result = self.service.run_matching("job-go-k8s")
                with lock:
                    results.append(result)
            except Exception as e:
                with lock:
                    errors.append(e)

        threads = [threading.Thread(target=run) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(errors, [])
        self.assertEqual(len(results), 4)
        self.assertEqual(sum(r.applications_created for r in results), 2)
        self.assertTrue(all(r.failures == [] for r in results))
        self.assertEqual(self.application_count(), 2)

    def test_04_unknown_posting(self):
        with self.assertRaises(PostingNotFound):
            self.service.run_matching("job-does-not-exist")
        self.assertEqual(self.application_count(), 0)


@pytest.mark.db
def test_malformed_resume_does_not_block_pool(sqlite_db):
    seed(sqlite_db)
    with sqlite_db.uow() as repo:
        broken = golang_candidate_resume("broken@example.com")
        broken["experience"][0]["endDate"] = "whenever"
        repo.db.add(JobApplicant(email="broken@example.com", resume=broken))

    service = MatchingService(MatchingConfig(max_workers=2), uow_factory=sqlite_db.uow, clock=fixed_clock)
    result = service.run_matching("job-go-k8s")

    assert len(result.matches) == 3
    assert len(result.failures) == 1
    assert result.failures[0].stage == "scoring"
    assert result.applications_created == 2
