#!/usr/bin/env python3
"""
Error handlers mapping scoring errors onto HTTP responses.
"""

import logging
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import (
    ScoringServiceError,
    Unauthenticated,
    Forbidden,
    InvalidInput,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error, error_type: str, **extra) -> JSONResponse:
    content = {
        "success": False,
        "error": error,
        "type": error_type
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def scoring_exception_handler(
    request: Request,
    exc: ScoringServiceError
) -> JSONResponse:
    """
    Handle scoring errors.

    Unauthenticated -> 401, Forbidden -> 403, InvalidInput -> 400,
    anything else -> 500.
    """
    status_code = 500
    headers = None
    if isinstance(exc, Unauthenticated):
        status_code = 401
        headers = {"WWW-Authenticate": "Bearer"}
    elif isinstance(exc, Forbidden):
        status_code = 403
    elif isinstance(exc, InvalidInput):
        status_code = 400

    if status_code == 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} on {request.url.path}: {exc}")

    response = _error_response(status_code, str(exc), exc.__class__.__name__)
    if headers:
        response.headers.update(headers)
    return response


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies as 400 rather than FastAPI's default 422.
    """
    return _error_response(
        400,
        "Invalid request body",
        InvalidInput.__name__,
        details=jsonable_encoder(exc.errors())
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle HTTP exceptions (including routing 404/405) with consistent format.
    """
    response = _error_response(exc.status_code, exc.detail, "HTTPException")
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return _error_response(500, "Internal server error", "InternalError")
