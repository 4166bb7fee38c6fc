#!/usr/bin/env python3
"""
Request models for API endpoints.

Field names follow the camelCase JSON used by the procurement frontend.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, Optional

from core.scorer.models import BidSubmission, ScoringCriteria


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BidData(_CamelModel):
    """Bid submission. Omitted or null proposals were not submitted."""
    id: str = ""
    tender_id: str = ""
    vendor_id: str = ""
    technical_proposal: Optional[Dict[str, Any]] = None
    commercial_proposal: Optional[Dict[str, Any]] = None
    financial_proposal: Optional[Dict[str, Any]] = None

    def to_submission(self) -> BidSubmission:
        return BidSubmission(
            id=self.id,
            tender_id=self.tender_id,
            vendor_id=self.vendor_id,
            technical_proposal=self.technical_proposal,
            commercial_proposal=self.commercial_proposal,
            financial_proposal=self.financial_proposal,
        )


class CriteriaData(_CamelModel):
    """Dimension weights. Not required to sum to 1."""
    technical_weight: float = 0.0
    commercial_weight: float = 0.0
    financial_weight: float = 0.0
    criteria: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Rule parameters, passed through to the scorers"
    )

    def to_criteria(self) -> ScoringCriteria:
        return ScoringCriteria(
            technical_weight=self.technical_weight,
            commercial_weight=self.commercial_weight,
            financial_weight=self.financial_weight,
            criteria=self.criteria or {},
        )


class ScoreRequest(_CamelModel):
    """Request to score one bid."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "bidData": {
                    "id": "bid-001",
                    "tenderId": "tender-42",
                    "vendorId": "vendor-7",
                    "technicalProposal": {"experience": 8, "certifications": ["ISO9001", "ISO27001", "SOC2", "CMMI"]},
                    "commercialProposal": {"deliveryTime": 21, "warranty": 24},
                    "financialProposal": {"totalPrice": 250000}
                },
                "criteria": {
                    "technicalWeight": 0.5,
                    "commercialWeight": 0.3,
                    "financialWeight": 0.2,
                    "criteria": {}
                }
            }
        }
    )

    bid_data: BidData
    criteria: CriteriaData
