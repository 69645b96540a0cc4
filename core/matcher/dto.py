"""Data Transfer Objects for the matching service.

DTOs carry data outside of the Unit of Work context: ORM rows are copied
into plain Python objects while the session is open, so scoring threads never
touch a Session.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List

from core.scorer.models import MatchResult
from core.scorer.service import is_qualifying

STAGE_SCORING = "scoring"
STAGE_PERSISTENCE = "persistence"


@dataclass(frozen=True)
class CandidateRecordDTO:
    """Candidate id and a private copy of the stored resume document."""
    candidate_id: str
    resume: Dict[str, Any]

    @classmethod
    def from_orm(cls, applicant) -> "CandidateRecordDTO":
        return cls(candidate_id=str(applicant.id), resume=copy.deepcopy(applicant.resume or {}))


@dataclass(frozen=True)
class CandidateFailure:
    """A candidate that could not be scored or whose application could not be saved."""
    candidate_id: str
    stage: str  # scoring | persistence
    error: str


@dataclass
class MatchingRunResult:
    """Outcome of one matching run for one posting.

    matches is the full ranked list (total score descending, ties in
    candidate-pool order). Candidates that failed scoring are absent from
    matches and listed in failures; persistence failures keep their match.
    """
    job_id: str
    candidates_total: int = 0
    matches: List[MatchResult] = field(default_factory=list)
    failures: List[CandidateFailure] = field(default_factory=list)
    applications_created: int = 0

    @property
    def qualifying(self) -> List[MatchResult]:
        return [m for m in self.matches if is_qualifying(m)]

    def top(self, n: int) -> List[MatchResult]:
        return self.matches[:n]

    def summary(self) -> Dict[str, Any]:
        return {
            'job_id': self.job_id,
            'candidates_total': self.candidates_total,
            'scored': len(self.matches),
            'qualifying': len(self.qualifying),
            'applications_created': self.applications_created,
            'failures': [
                {'candidate_id': f.candidate_id, 'stage': f.stage, 'error': f.error}
                for f in self.failures
            ],
        }
