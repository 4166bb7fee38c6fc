#!/usr/bin/env python3
"""
FastAPI dependencies for authentication and role gating.
"""

from typing import Callable, Optional
from fastapi import Depends, Header, Request

from core.auth import Authenticator, CallerIdentity, authorize, extract_bearer_token


def get_authenticator(request: Request) -> Authenticator:
    """Return the Authenticator built from config at application startup."""
    return request.app.state.authenticator


def get_current_identity(
    authorization: Optional[str] = Header(default=None),
    authenticator: Authenticator = Depends(get_authenticator)
) -> CallerIdentity:
    """
    FastAPI dependency that verifies the bearer credential.

    Raises:
        Unauthenticated: if the header is missing or the credential is invalid.
    """
    token = extract_bearer_token(authorization)
    return authenticator.authenticate(token)


def require_roles(*roles: str) -> Callable[..., CallerIdentity]:
    """
    Build a dependency admitting only callers holding one of roles.

    Usage:
        @router.post("/score")
        def score(identity: CallerIdentity = Depends(require_roles("USER", "ADMIN"))):
            ...

    This is the transport-level gate; the scoring engine checks roles again.
    """
    def _dependency(identity: CallerIdentity = Depends(get_current_identity)) -> CallerIdentity:
        authorize(identity.role, roles)
        return identity

    return _dependency
