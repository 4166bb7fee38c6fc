#!/usr/bin/env python3
"""
Health endpoint - no authentication required.
"""

from fastapi import APIRouter

from core.auth import SCORING_ROLES
from ..models.responses import HealthResponse

SERVICE_NAME = "bid-scoring"
SERVICE_VERSION = "1.0.0"

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        role_access=list(SCORING_ROLES)
    )
