#!/usr/bin/env python3
"""
Scoring Models - Data structures for bid scoring.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class RiskTier(str, Enum):
    """Risk tiers, highest risk first."""
    HIGH_RISK = "HIGH_RISK"
    MEDIUM_RISK = "MEDIUM_RISK"
    LOW_RISK = "LOW_RISK"


class RecommendationTier(str, Enum):
    """Recommendation tiers, weakest first."""
    NOT_RECOMMENDED = "NOT_RECOMMENDED"
    CONDITIONAL = "CONDITIONAL"
    RECOMMENDED = "RECOMMENDED"
    STRONGLY_RECOMMENDED = "STRONGLY_RECOMMENDED"


@dataclass
class BidSubmission:
    """A vendor's bid. A proposal left as None was not submitted."""
    id: str
    tender_id: str = ""
    vendor_id: str = ""
    technical_proposal: Optional[Dict[str, Any]] = None
    commercial_proposal: Optional[Dict[str, Any]] = None
    financial_proposal: Optional[Dict[str, Any]] = None


@dataclass
class ScoringCriteria:
    """
    Dimension weights plus rule parameters.

    Weights are used as given: they need not sum to 1 and may be negative,
    so the total score is not bounded to [0, 1].
    """
    technical_weight: float = 0.0
    commercial_weight: float = 0.0
    financial_weight: float = 0.0
    criteria: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of scoring one bid. Never persisted by the engine."""
    bid_id: str
    technical_score: float
    commercial_score: float
    financial_score: float
    total_score: float
    recommendation: RecommendationTier
    risk_assessment: RiskTier
