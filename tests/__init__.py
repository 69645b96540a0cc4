#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the SQLite-backed persistence tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Persistence and end-to-end tests use a file-backed SQLite database created in
a temporary directory, so no external database is required. The atomic
application upsert is exercised through SQLite's ON CONFLICT support.
"""

import os
import shutil
import tempfile
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import sessionmaker

# Fixed evaluation instant for experience math.
FIXED_NOW = datetime(2024, 1, 1)


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_resume_dict(
    first_name: str = "Ada",
    last_name: str = "Lovelace",
    email: str = "ada@example.com",
    skills: Optional[List[str]] = None,
    summary: str = "",
    experience: Optional[List[Dict[str, str]]] = None,
    education: Optional[List[Dict[str, str]]] = None,
    country: Optional[str] = None,
    city: Optional[str] = None
) -> Dict[str, Any]:
    """Build a resume document in the stored (camelCase) shape."""
    personal = {"firstName": first_name, "lastName": last_name, "email": email}
    if country is not None:
        personal["country"] = country
    if city is not None:
        personal["city"] = city
    return {
        "personal": personal,
        "skills": [{"name": s} for s in (skills or [])],
        "professionalSummary": summary,
        "experience": experience or [],
        "education": education or [],
    }


def go_kubernetes_posting_fields() -> Dict[str, Any]:
    """Remote 2-4 year Go/Kubernetes posting used across scoring and e2e tests."""
    return {
        "job_id": "job-go-k8s",
        "job_role": "Backend Engineer",
        "job_description": "Build services with Go and Kubernetes",
        "skills": ["Go", "Kubernetes"],
        "experience": "2-4",
        "job_location": "remote",
    }


def golang_candidate_resume(email: str = "gopher@example.com") -> Dict[str, Any]:
    """Candidate with Golang/Docker skills and one ongoing role since 03/2021."""
    return make_resume_dict(
        first_name="Gopher",
        last_name="Smith",
        email=email,
        skills=["Golang", "Docker"],
        summary="Backend engineer",
        experience=[{
            "role": "Engineer",
            "description": "Built Golang services",
            "startDate": "03/2021",
            "endDate": "Present",
        }],
        education=[],
    )


class SQLiteTestDatabase:
    """File-backed SQLite database with the full schema, for one test case."""

    def __init__(self):
        from database.database import build_engine
        from database.models import Base

        self.temp_dir = tempfile.mkdtemp()
        self.path = os.path.join(self.temp_dir, "matching_test.db")
        self.url = f"sqlite:///{self.path}"
        self.engine = build_engine(self.url)
        Base.metadata.create_all(bind=self.engine)
        self.session_factory = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    def uow(self):
        from database.uow import job_uow
        return job_uow(self.session_factory)

    def close(self):
        self.engine.dispose()
        shutil.rmtree(self.temp_dir, ignore_errors=True)
