"""Matcher Module - Ranks a candidate pool against one job posting.

The orchestrator lives in core.matcher.service (MatchingService); it is not
re-exported here so that scorer modules can import the input models without
a circular import.
"""
from core.matcher.models import (
    JobPostingProfile, CandidateResume, PersonalInfo, Skill,
    ExperienceEntry, EducationEntry, normalize_resume
)

__all__ = [
    'JobPostingProfile', 'CandidateResume', 'PersonalInfo', 'Skill',
    'ExperienceEntry', 'EducationEntry', 'normalize_resume'
]
