#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


@dataclass(frozen=True)
class ComponentScores:
    """Component scores for one candidate, each in [0, 100].

    Raw floats before rounding; see MatchBreakdown for the reported integers.
    """
    skills: float
    experience: float
    location: float
    text_similarity: float
    education: float


@dataclass(frozen=True)
class MatchBreakdown:
    """Rounded component scores reported alongside the total."""
    skills_match: int
    experience_match: int
    location_match: int
    role_similarity: int
    education_relevance: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'skills_match': self.skills_match,
            'experience_match': self.experience_match,
            'location_match': self.location_match,
            'role_similarity': self.role_similarity,
            'education_relevance': self.education_relevance,
        }


class RecommendationTier(Enum):
    """Qualitative label derived from the total score."""
    STRONG = "strong_match"
    GOOD = "good_match"
    POTENTIAL = "potential_match"
    WEAK = "weak_match"


@dataclass(frozen=True)
class Recommendation:
    tier: RecommendationTier
    summary: str
    score: int
    insights: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'tier': self.tier.value,
            'recommendation': self.summary,
            'score': self.score,
            'insights': list(self.insights),
        }


@dataclass(frozen=True)
class MatchResult:
    """Scored match of one candidate against one posting. Recomputed every run."""
    candidate_id: str
    name: str
    email: str
    total_score: int
    breakdown: MatchBreakdown
    recommendation: Recommendation

    def to_dict(self) -> Dict[str, Any]:
        return {
            'candidate_id': self.candidate_id,
            'name': self.name,
            'email': self.email,
            'total_score': self.total_score,
            'details': self.breakdown.to_dict(),
            'recommendation': self.recommendation.to_dict(),
        }
