#!/usr/bin/env python3
"""
Skills Match - Share of required skills found in the candidate's skill list.
"""

from typing import Iterable, List, Sequence

from core.matcher.models import Skill


def _skill_matches(required: str, candidate: str) -> bool:
    # Bidirectional containment: "Go" matches "Golang" and "Golang" matches "Go".
    return required in candidate or candidate in required


def calculate_skills_match(job_skills: Sequence[str], candidate_skills: Iterable[Skill]) -> float:
    """
    Calculate skills match percentage.

    Returns:
        (required skills with at least one match / total required) * 100,
        or 0.0 when either list is empty
    """
    candidate_names: List[str] = [
        s.name.lower() for s in candidate_skills if s.name and s.name.strip()
    ]
    if not job_skills or not candidate_names:
        return 0.0

    matched = [
        skill for skill in job_skills
        if any(_skill_matches(skill.lower(), name) for name in candidate_names)
    ]
    return len(matched) / len(job_skills) * 100.0
