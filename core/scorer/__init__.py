#!/usr/bin/env python3
"""
Scoring Module - Multi-factor candidate/posting scoring.

Public API:
- ScoringService: Scores one candidate against one posting
- MatchResult: Scored match with breakdown and recommendation

Modules:
- text_similarity.py: Term-weighted text overlap
- skills.py: Required skill coverage
- experience.py: Experience bucket evaluation
- location.py: Location compatibility
- education.py: Degree relevance
- aggregate.py: Weighted total and rounded breakdown
- recommendation.py: Tier and insights
- persistence.py: Application record upsert
- service.py: ScoringService orchestrator
"""

from core.scorer.models import (
    ComponentScores, MatchBreakdown, MatchResult, Recommendation, RecommendationTier
)
from core.scorer.service import ScoringService, QUALIFYING_SCORE, is_qualifying

__all__ = [
    'ScoringService', 'QUALIFYING_SCORE', 'is_qualifying',
    'ComponentScores', 'MatchBreakdown', 'MatchResult',
    'Recommendation', 'RecommendationTier',
]
