#!/usr/bin/env python3
"""
Unit tests for score aggregation and recommendations.
"""

import unittest

from core.scorer.aggregate import WEIGHTS, build_breakdown, calculate_total_score
from core.scorer.models import ComponentScores, MatchBreakdown, RecommendationTier
from core.scorer.recommendation import (
    INSIGHT_EXPERIENCE_GAP, INSIGHT_LOCATION, INSIGHT_ROLE_ALIGNMENT,
    INSIGHT_SKILLS_GAP, INSIGHT_STRONG_EXPERIENCE, INSIGHT_STRONG_SKILLS,
    classify, generate_insights, generate_recommendation
)
from core.utils import round_half_up


def components(skills=0.0, experience=0.0, location=0.0, text_similarity=0.0, education=0.0):
    return ComponentScores(
        skills=skills,
        experience=experience,
        location=location,
        text_similarity=text_similarity,
        education=education,
    )


def breakdown(skills=60, experience=60, location=100, role=50, education=50):
    return MatchBreakdown(
        skills_match=skills,
        experience_match=experience,
        location_match=location,
        role_similarity=role,
        education_relevance=education,
    )


class TestAggregate(unittest.TestCase):

    def test_weights_sum_to_one(self):
        self.assertAlmostEqual(sum(WEIGHTS.values()), 1.0)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(62.5), 63)
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(62.4999), 62)

    def test_total_rounds_half_up(self):
        """education=5 weighs in at exactly 0.5; Python's round() would give 0."""
        self.assertEqual(calculate_total_score(components(education=5.0)), 1)
        self.assertEqual(calculate_total_score(components(education=25.0)), 3)

    def test_total_bounds(self):
        self.assertEqual(calculate_total_score(components()), 0)
        self.assertEqual(calculate_total_score(components(100, 100, 100, 100, 100)), 100)

    def test_breakdown_rounds_each_component(self):
        result = build_breakdown(components(50.0, 66.5, 100.0, 28.278, 50.0))
        self.assertEqual(result, breakdown(50, 67, 100, 28, 50))


class TestRecommendation(unittest.TestCase):

    def test_tier_boundaries(self):
        print("\n🎯 Recommendation tier boundaries")
        cases = [
            (100, RecommendationTier.STRONG),
            (85, RecommendationTier.STRONG),
            (84, RecommendationTier.GOOD),
            (70, RecommendationTier.GOOD),
            (69, RecommendationTier.POTENTIAL),
            (60, RecommendationTier.POTENTIAL),
            (59, RecommendationTier.WEAK),
            (0, RecommendationTier.WEAK),
        ]
        for score, tier in cases:
            self.assertEqual(classify(score)[0], tier, f"score {score}")

    def test_summary_sentences(self):
        self.assertEqual(classify(90)[1], "Strong Match: Highly recommended for interview")
        self.assertEqual(classify(75)[1], "Good Match: Consider for interview")
        self.assertEqual(classify(65)[1], "Potential Match: Review additional qualifications")
        self.assertEqual(classify(10)[1], "Weak Match: May not meet core requirements")

    def test_positive_insights_co_occur(self):
        insights = generate_insights(breakdown(skills=90, experience=80, location=100, role=75))
        self.assertEqual(insights, [INSIGHT_STRONG_SKILLS, INSIGHT_STRONG_EXPERIENCE, INSIGHT_ROLE_ALIGNMENT])

    def test_gap_insights(self):
        insights = generate_insights(breakdown(skills=40, experience=49, location=0, role=10))
        self.assertEqual(insights, [INSIGHT_SKILLS_GAP, INSIGHT_EXPERIENCE_GAP, INSIGHT_LOCATION])

    def test_no_insights(self):
        self.assertEqual(generate_insights(breakdown(skills=60, experience=60, location=50, role=74)), [])

    def test_generate_recommendation(self):
        rec = generate_recommendation(67, breakdown(skills=50, experience=100, location=100, role=28))
        self.assertEqual(rec.tier, RecommendationTier.POTENTIAL)
        self.assertEqual(rec.score, 67)
        self.assertEqual(rec.insights, [INSIGHT_STRONG_EXPERIENCE])
        self.assertEqual(rec.to_dict()['tier'], 'potential_match')


if __name__ == '__main__':
    unittest.main()
