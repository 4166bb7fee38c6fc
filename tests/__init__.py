#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    uv run python -m pytest tests/ -v

    # Using unittest
    uv run python -m unittest discover tests -v

No external services are needed: tokens are minted locally with a test secret.
"""

import time
from typing import Any, Optional

import jwt

# 64 bytes so every HMAC variant gets a full-length key
TEST_JWT_SECRET = "test-secret-for-bid-scoring-service-0123456789-abcdefghijklmnopq"


def make_token(
    role: Optional[str] = "USER",
    secret: str = TEST_JWT_SECRET,
    algorithm: str = "HS256",
    expires_in: int = 3600,
    **claims: Any
) -> str:
    """Mint a signed credential. Pass role=None to omit the role claim."""
    now = int(time.time())
    payload = {
        "sub": "user-123",
        "email": "evaluator@example.com",
        "iss": "procurement-api",
        "iat": now,
        "exp": now + expires_in,
    }
    if role is not None:
        payload["role"] = role
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm=algorithm)
