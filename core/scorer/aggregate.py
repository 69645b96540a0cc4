#!/usr/bin/env python3
"""
Score Aggregation - Weighted total of the five component scores.

    total = round(skills*0.35 + experience*0.25 + location*0.15
                  + text_similarity*0.15 + education*0.10)

Weights are fixed; they are not part of the configuration.
"""

from typing import Dict

from core.scorer.models import ComponentScores, MatchBreakdown
from core.utils import clamp, round_half_up

WEIGHTS: Dict[str, float] = {
    'skills': 0.35,
    'experience': 0.25,
    'location': 0.15,
    'text_similarity': 0.15,
    'education': 0.10,
}

assert abs(sum(WEIGHTS.values()) - 1.0) < 1e-9, "score weights must sum to 1.0"


def weighted_score(components: ComponentScores) -> float:
    return sum(getattr(components, name) * weight for name, weight in WEIGHTS.items())


def calculate_total_score(components: ComponentScores) -> int:
    """Weighted total rounded half-up and kept within [0, 100]."""
    return round_half_up(clamp(weighted_score(components)))


def build_breakdown(components: ComponentScores) -> MatchBreakdown:
    return MatchBreakdown(
        skills_match=round_half_up(clamp(components.skills)),
        experience_match=round_half_up(clamp(components.experience)),
        location_match=round_half_up(clamp(components.location)),
        role_similarity=round_half_up(clamp(components.text_similarity)),
        education_relevance=round_half_up(clamp(components.education)),
    )
