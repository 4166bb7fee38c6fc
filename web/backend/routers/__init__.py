"""API route handlers."""

from .scoring import router as scoring_router
from .health import router as health_router
