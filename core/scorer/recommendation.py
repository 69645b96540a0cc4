#!/usr/bin/env python3
"""
Recommendations - Tier and qualitative insights for a scored candidate.

Tier thresholds are inclusive lower bounds on the total score. Insights are
evaluated independently per component on the rounded breakdown, so several
may apply at once and none is also a valid outcome.
"""

from typing import List, Tuple

from core.scorer.models import MatchBreakdown, Recommendation, RecommendationTier

TIERS: Tuple[Tuple[int, RecommendationTier, str], ...] = (
    (85, RecommendationTier.STRONG, "Strong Match: Highly recommended for interview"),
    (70, RecommendationTier.GOOD, "Good Match: Consider for interview"),
    (60, RecommendationTier.POTENTIAL, "Potential Match: Review additional qualifications"),
)
WEAK_SUMMARY = "Weak Match: May not meet core requirements"

INSIGHT_STRONG_SKILLS = "Strong skills alignment with job requirements"
INSIGHT_SKILLS_GAP = "Consider evaluating technical skill gaps"
INSIGHT_STRONG_EXPERIENCE = "Experience level well-suited for the position"
INSIGHT_EXPERIENCE_GAP = "May need additional experience in the field"
INSIGHT_LOCATION = "Location might be a consideration for this role"
INSIGHT_ROLE_ALIGNMENT = "Previous roles strongly align with position"


def classify(total_score: int) -> Tuple[RecommendationTier, str]:
    for threshold, tier, summary in TIERS:
        if total_score >= threshold:
            return tier, summary
    return RecommendationTier.WEAK, WEAK_SUMMARY


def generate_insights(breakdown: MatchBreakdown) -> List[str]:
    insights = []

    if breakdown.skills_match >= 80:
        insights.append(INSIGHT_STRONG_SKILLS)
    elif breakdown.skills_match < 50:
        insights.append(INSIGHT_SKILLS_GAP)

    if breakdown.experience_match >= 80:
        insights.append(INSIGHT_STRONG_EXPERIENCE)
    elif breakdown.experience_match < 50:
        insights.append(INSIGHT_EXPERIENCE_GAP)

    if breakdown.location_match < 50:
        insights.append(INSIGHT_LOCATION)

    if breakdown.role_similarity >= 75:
        insights.append(INSIGHT_ROLE_ALIGNMENT)

    return insights


def generate_recommendation(total_score: int, breakdown: MatchBreakdown) -> Recommendation:
    tier, summary = classify(total_score)
    return Recommendation(
        tier=tier,
        summary=summary,
        score=total_score,
        insights=generate_insights(breakdown),
    )
