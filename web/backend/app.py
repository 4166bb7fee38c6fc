#!/usr/bin/env python3
"""
Bid Scoring Service - FastAPI Application

Scores procurement bids for authenticated USER and ADMIN callers.

Usage:
    uv run python main.py

Then open:
    - http://localhost:9090/health - Health check
    - http://localhost:9090/docs - API Documentation (Swagger UI)
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.auth import Authenticator
from core.config_loader import AppConfig
from core.exceptions import ScoringServiceError
from .config import get_config
from .exceptions import (
    scoring_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import scoring_router, health_router
from .routers.health import SERVICE_VERSION
from .routers.scoring import limiter

logger = logging.getLogger(__name__)


async def _rate_limit_exceeded_handler(request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": f"Rate limit exceeded: {exc.detail}", "type": "RateLimitExceeded"}
    )


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration to use; loaded from config.yaml and the
            environment when omitted.

    Returns:
        FastAPI: The configured application.
    """
    if config is None:
        config = get_config()

    app = FastAPI(
        title="Bid Scoring API",
        description="Role-gated evaluation of procurement bids",
        version=SERVICE_VERSION,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    # The secret is read once here and shared read-only by all requests
    app.state.config = config
    app.state.authenticator = Authenticator.from_config(config.auth)

    # Configure rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Register exception handlers
    app.add_exception_handler(ScoringServiceError, scoring_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Include routers
    app.include_router(health_router)
    app.include_router(scoring_router)

    return app


def main(config: Optional[AppConfig] = None):
    """Run the web server."""
    import uvicorn

    if config is None:
        config = get_config()

    logger.info(f"Bid Scoring Service starting on {config.web.host}:{config.web.port}")
    logger.info("Role-based access: USER, ADMIN only")
    logger.info("Available endpoints:")
    logger.info("   GET  /health - Health check")
    logger.info("   POST /score  - Score bid (requires auth)")

    uvicorn.run(
        create_app(config),
        host=config.web.host,
        port=config.web.port,
        log_level=config.logging.level.lower()
    )
