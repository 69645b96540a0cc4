from typing import Iterable

from core.matcher.models import EducationEntry

RELEVANT_DEGREE_SCORE = 100.0
DEFAULT_DEGREE_SCORE = 50.0


def calculate_education_relevance(job_role: str, education: Iterable[EducationEntry]) -> float:
    """100 if any degree mentions the role title, otherwise a soft 50."""
    role = (job_role or '').lower()
    for edu in education:
        if edu.degree and role in edu.degree.lower():
            return RELEVANT_DEGREE_SCORE
    return DEFAULT_DEGREE_SCORE
