#!/usr/bin/env python3
"""
Scoring endpoint - score a bid for an authenticated USER or ADMIN.
"""

from fastapi import APIRouter, Depends, Request

from slowapi import Limiter
from slowapi.util import get_remote_address

from core.auth import CallerIdentity, SCORING_ROLES
from core.scorer import score_bid
from ..dependencies import require_roles
from ..models.requests import ScoreRequest
from ..models.responses import ScoreResponse

SCORE_RATE_LIMIT = "120/minute"

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(tags=["scoring"])


@router.post("/score", response_model=ScoreResponse)
@limiter.limit(SCORE_RATE_LIMIT)
def score_bid_endpoint(
    request: Request,
    score_request: ScoreRequest,
    identity: CallerIdentity = Depends(require_roles(*SCORING_ROLES))
):
    """
    Score a bid.

    Requires a bearer token with role USER or ADMIN. Returns dimension
    scores (0-1), the weighted total, a recommendation tier and a risk tier.
    """
    result = score_bid(
        score_request.bid_data.to_submission(),
        score_request.criteria.to_criteria(),
        identity.role
    )
    return ScoreResponse.from_result(result)
