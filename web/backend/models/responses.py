#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List

from core.scorer.models import RecommendationTier, RiskTier, ScoreResult


class ScoreResponse(BaseModel):
    """Score breakdown for one bid."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "bidId": "bid-001",
                "technicalScore": 1.0,
                "commercialScore": 1.0,
                "financialScore": 0.8,
                "totalScore": 0.96,
                "recommendation": "STRONGLY_RECOMMENDED",
                "riskAssessment": "LOW_RISK"
            }
        }
    )

    bid_id: str
    technical_score: float
    commercial_score: float
    financial_score: float
    # Unbounded: weights are not normalized
    total_score: float
    recommendation: RecommendationTier
    risk_assessment: RiskTier

    @classmethod
    def from_result(cls, result: ScoreResult) -> "ScoreResponse":
        return cls(
            bid_id=result.bid_id,
            technical_score=result.technical_score,
            commercial_score=result.commercial_score,
            financial_score=result.financial_score,
            total_score=result.total_score,
            recommendation=result.recommendation,
            risk_assessment=result.risk_assessment,
        )


class HealthResponse(BaseModel):
    """Service health."""
    status: str
    service: str
    version: str
    role_access: List[str]
