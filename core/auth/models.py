#!/usr/bin/env python3
"""
Auth Models - Identity extracted from a verified credential.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping, Optional


def _timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        # Valid NumericDate beyond what datetime can represent
        return None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class CallerIdentity:
    """Verified caller claims. Consumed by the authorizer and audit logging only."""
    user_id: str
    email: str
    role: str
    issuer: Optional[str] = None
    expires_at: Optional[datetime] = None
    issued_at: Optional[datetime] = None
    claims: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_claims(cls, claims: Mapping[str, Any]) -> "CallerIdentity":
        """Build an identity from an already verified claim set."""
        issuer = claims.get("iss")
        return cls(
            user_id=_text(claims.get("sub")),
            email=_text(claims.get("email")),
            role=_text(claims.get("role")),
            issuer=issuer if isinstance(issuer, str) else None,
            expires_at=_timestamp(claims.get("exp")),
            issued_at=_timestamp(claims.get("iat")),
            claims=MappingProxyType(dict(claims)),
        )
