#!/usr/bin/env python3
"""
Location Match - Geographic compatibility between posting and candidate.
"""

from core.matcher.models import JobPostingProfile, PersonalInfo

REMOTE = 'remote'
ONSITE = 'onsite'


def _norm(value) -> str:
    return (value or '').strip().lower()


def calculate_location_match(job: JobPostingProfile, personal: PersonalInfo) -> float:
    """
    Remote postings always score 100. Onsite postings score 100 for the same
    country and city, 50 for the same country only, 0 otherwise or when the
    candidate's country or city is missing.
    """
    if job.location_mode == REMOTE:
        return 100.0

    candidate_country = _norm(personal.country)
    candidate_city = _norm(personal.city)
    if not candidate_country or not candidate_city:
        return 0.0

    if job.location_mode == ONSITE:
        same_country = _norm(job.country) == candidate_country
        if same_country and _norm(job.city) == candidate_city:
            return 100.0
        if same_country:
            return 50.0

    return 0.0
