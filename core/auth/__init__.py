#!/usr/bin/env python3
"""
Auth Module - credential verification and role gating.

Public API:
- Authenticator: verifies HMAC-signed bearer credentials
- CallerIdentity: verified claims of the caller
- authorize: exact-match role gate
- SCORING_ROLES: roles permitted to score bids

- models.py: Data structures (CallerIdentity)
- authenticator.py: JWT verification (Authenticator, extract_bearer_token)
- authorizer.py: Role checks (authorize, SCORING_ROLES)
"""

from core.auth.models import CallerIdentity
from core.auth.authenticator import Authenticator, extract_bearer_token
from core.auth.authorizer import SCORING_ROLES, authorize

__all__ = [
    'Authenticator',
    'CallerIdentity',
    'SCORING_ROLES',
    'authorize',
    'extract_bearer_token',
]
