#!/usr/bin/env python3
"""
Scoring Service - role-gated bid scoring pipeline.

score_bid runs its own role check even though the HTTP layer already gates
the /score route, so callers that reach the engine another way (a job queue,
a script) are still authorized.

Pipeline:
1. Role gate (USER or ADMIN)
2. Dimension scores; a proposal that was not submitted scores 0.0
3. Weighted total, risk tier and recommendation tier
4. One audit log record
"""

from typing import Any, Callable, Dict, Mapping, Optional
import logging

from core.auth.authorizer import SCORING_ROLES, is_permitted
from core.exceptions import Forbidden
from core.scorer import aggregation
from core.scorer.dimensions import (
    calculate_commercial_score,
    calculate_financial_score,
    calculate_technical_score,
)
from core.scorer.models import BidSubmission, ScoreResult, ScoringCriteria

logger = logging.getLogger(__name__)

DimensionScorer = Callable[[Mapping[str, Any], Mapping[str, Any]], float]


def ensure_scoring_permitted(caller_role: str) -> None:
    """
    Engine-side role gate, independent of the transport's gate.

    Raises:
        Forbidden: if caller_role is not USER or ADMIN.
    """
    if not is_permitted(caller_role, SCORING_ROLES):
        raise Forbidden("forbidden: insufficient permissions for scoring")


def _score_dimension(
    scorer: DimensionScorer,
    proposal: Optional[Dict[str, Any]],
    criteria: Mapping[str, Any]
) -> float:
    if proposal is None:
        return 0.0
    return scorer(proposal, criteria)


def score_bid(
    bid: BidSubmission,
    criteria: ScoringCriteria,
    caller_role: str
) -> ScoreResult:
    """
    Score a bid against weighted criteria.

    Args:
        bid: Bid with up to three proposal documents
        criteria: Dimension weights and rule parameters
        caller_role: Role from the caller's verified identity

    Returns:
        ScoreResult with dimension scores, weighted total and tiers

    Raises:
        Forbidden: if caller_role may not score bids
    """
    ensure_scoring_permitted(caller_role)

    rule_params = criteria.criteria or {}
    technical_score = _score_dimension(calculate_technical_score, bid.technical_proposal, rule_params)
    commercial_score = _score_dimension(calculate_commercial_score, bid.commercial_proposal, rule_params)
    financial_score = _score_dimension(calculate_financial_score, bid.financial_proposal, rule_params)

    total_score = aggregation.calculate_total_score(
        technical_score, commercial_score, financial_score, criteria
    )

    result = ScoreResult(
        bid_id=bid.id,
        technical_score=technical_score,
        commercial_score=commercial_score,
        financial_score=financial_score,
        total_score=total_score,
        recommendation=aggregation.recommend(total_score),
        risk_assessment=aggregation.assess_risk(total_score),
    )

    aggregation.log_score_audit(result, caller_role)
    return result
