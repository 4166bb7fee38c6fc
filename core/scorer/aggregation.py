#!/usr/bin/env python3
"""
Aggregation - Weighted total score and tier assignment.

Formula: total = technical * w_t + commercial * w_c + financial * w_f

The total is not clamped or renormalized. Tier thresholds are fixed and
every lower bound is inclusive.
"""

import logging
import sys

from core.scorer.models import RecommendationTier, RiskTier, ScoreResult, ScoringCriteria

audit_logger = logging.getLogger("core.scorer.audit")

MEDIUM_RISK_THRESHOLD = 0.2
LOW_RISK_THRESHOLD = 0.6

STRONGLY_RECOMMENDED_THRESHOLD = 0.8
RECOMMENDED_THRESHOLD = 0.6
CONDITIONAL_THRESHOLD = 0.4


def calculate_total_score(
    technical_score: float,
    commercial_score: float,
    financial_score: float,
    criteria: ScoringCriteria
) -> float:
    return (
        technical_score * criteria.technical_weight +
        commercial_score * criteria.commercial_weight +
        financial_score * criteria.financial_weight
    )


def assess_risk(total_score: float) -> RiskTier:
    if total_score < MEDIUM_RISK_THRESHOLD:
        return RiskTier.HIGH_RISK
    if total_score < LOW_RISK_THRESHOLD:
        return RiskTier.MEDIUM_RISK
    return RiskTier.LOW_RISK


def recommend(total_score: float) -> RecommendationTier:
    if total_score >= STRONGLY_RECOMMENDED_THRESHOLD:
        return RecommendationTier.STRONGLY_RECOMMENDED
    if total_score >= RECOMMENDED_THRESHOLD:
        return RecommendationTier.RECOMMENDED
    if total_score >= CONDITIONAL_THRESHOLD:
        return RecommendationTier.CONDITIONAL
    return RecommendationTier.NOT_RECOMMENDED


def log_score_audit(result: ScoreResult, caller_role: str) -> None:
    """
    Emit the audit record for one scoring invocation.

    A handler that raises is reported on stderr, the way logging's own
    Handler.handleError does; the score is still returned.
    """
    audit = {
        "bid_id": result.bid_id,
        "caller_role": caller_role,
        "total_score": result.total_score,
        "risk_assessment": result.risk_assessment.value,
        "recommendation": result.recommendation.value,
    }
    try:
        audit_logger.info(
            "Bid %s scored by user role %s: Total=%.2f, Risk=%s, Recommendation=%s",
            result.bid_id,
            caller_role,
            result.total_score,
            result.risk_assessment.value,
            result.recommendation.value,
            extra={"audit": audit}
        )
    except Exception as e:
        sys.stderr.write(f"Failed to emit audit record for bid {result.bid_id}: {e!r}\n")
