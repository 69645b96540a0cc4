#!/usr/bin/env python3
"""
Matcher Models - Immutable inputs for a matching run.

JobPostingProfile and CandidateResume are plain values detached from the
database session, so they can be shared read-only across scoring threads.
Resumes are stored as JSON on the applicant row; from_dict accepts the
camelCase keys written by the applicant frontend and snake_case equivalents.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from core.exceptions import CandidateDataError

ONGOING_SENTINEL = "present"


def _get(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _as_mapping(value: Any, what: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise CandidateDataError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise CandidateDataError(f"{what} must be a list, got {type(value).__name__}")
    return list(value)


@dataclass(frozen=True)
class JobPostingProfile:
    """Job posting fields the matcher needs."""
    id: str
    job_id: str
    role: str
    description: str
    skills: Tuple[str, ...]
    experience: str
    location_mode: str
    country: Optional[str] = None
    city: Optional[str] = None

    @property
    def text(self) -> str:
        return f"{self.role} {self.description}"

    @classmethod
    def from_orm(cls, job_post) -> "JobPostingProfile":
        return cls(
            id=str(job_post.id),
            job_id=job_post.job_id,
            role=job_post.job_role or "",
            description=job_post.job_description or "",
            skills=tuple(job_post.skills or ()),
            experience=job_post.experience or "",
            location_mode=(job_post.job_location or "").strip().lower(),
            country=job_post.country,
            city=job_post.city,
        )


@dataclass(frozen=True)
class PersonalInfo:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    country: Optional[str] = None
    city: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Skill:
    name: str


@dataclass(frozen=True)
class ExperienceEntry:
    role: str = ""
    description: str = ""
    start_date: Optional[str] = None  # MM/YYYY
    end_date: Optional[str] = None  # MM/YYYY or "Present"

    @property
    def is_ongoing(self) -> bool:
        return isinstance(self.end_date, str) and self.end_date.strip().lower() == ONGOING_SENTINEL


@dataclass(frozen=True)
class EducationEntry:
    degree: Optional[str] = None


@dataclass(frozen=True)
class CandidateResume:
    """A candidate's resume as read from storage."""
    candidate_id: str
    personal: PersonalInfo
    skills: Tuple[Skill, ...] = ()
    professional_summary: str = ""
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()

    @property
    def text(self) -> str:
        """Summary followed by every role and description, as one blob."""
        narrative = " ".join(f"{exp.role} {exp.description}" for exp in self.experience)
        return f"{self.professional_summary} {narrative}"

    @classmethod
    def from_dict(cls, candidate_id: str, data: Dict[str, Any]) -> "CandidateResume":
        data = _as_mapping(data, "resume")
        personal = _as_mapping(data.get("personal"), "resume.personal")

        skills = []
        for item in _as_list(data.get("skills"), "resume.skills"):
            if isinstance(item, str):
                skills.append(Skill(name=item))
            else:
                skills.append(Skill(name=str(_get(_as_mapping(item, "skill"), "name", default=""))))

        experience = []
        for item in _as_list(data.get("experience"), "resume.experience"):
            item = _as_mapping(item, "experience entry")
            experience.append(ExperienceEntry(
                role=_get(item, "role", "title", default=""),
                description=_get(item, "description", default=""),
                start_date=_get(item, "startDate", "start_date"),
                end_date=_get(item, "endDate", "end_date"),
            ))

        education = [
            EducationEntry(degree=_get(_as_mapping(item, "education entry"), "degree"))
            for item in _as_list(data.get("education"), "resume.education")
        ]

        return cls(
            candidate_id=str(candidate_id),
            personal=PersonalInfo(
                first_name=_get(personal, "firstName", "first_name", default=""),
                last_name=_get(personal, "lastName", "last_name", default=""),
                email=_get(personal, "email", default=""),
                country=_get(personal, "country"),
                city=_get(personal, "city"),
            ),
            skills=tuple(skills),
            professional_summary=_get(data, "professionalSummary", "professional_summary", default=""),
            experience=tuple(experience),
            education=tuple(education),
        )


def normalize_resume(resume: CandidateResume) -> CandidateResume:
    """Return a copy with missing country/city replaced by an empty placeholder.

    The input is never modified.
    """
    personal = resume.personal
    if personal.country is not None and personal.city is not None:
        return resume
    return replace(
        resume,
        personal=replace(
            personal,
            country=personal.country if personal.country is not None else "",
            city=personal.city if personal.city is not None else "",
        ),
    )
