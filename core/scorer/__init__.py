#!/usr/bin/env python3
"""
Scoring Module - Role-gated bid scoring.

Public API:
- score_bid: Score one bid for a caller role
- BidSubmission, ScoringCriteria, ScoreResult: Data structures
- RecommendationTier, RiskTier: Tier labels

Modules:
- models.py: Data structures
- fields.py: Typed lookups over proposal documents
- dimensions.py: Technical, commercial and financial scorers
- aggregation.py: Weighted total, tiers and the audit record
- service.py: score_bid orchestrator and the engine role gate
"""

from core.scorer.models import (
    BidSubmission,
    RecommendationTier,
    RiskTier,
    ScoreResult,
    ScoringCriteria,
)
from core.scorer.service import ensure_scoring_permitted, score_bid

__all__ = [
    'BidSubmission',
    'RecommendationTier',
    'RiskTier',
    'ScoreResult',
    'ScoringCriteria',
    'ensure_scoring_permitted',
    'score_bid',
]
