#!/usr/bin/env python3
"""
Authenticator - verifies HMAC-signed JWT bearer credentials.

Only the HMAC family (HS256/HS384/HS512) is accepted. The algorithm named in
the token header is checked before the signature so that a token signed with
an asymmetric or "none" algorithm is never verified against the shared secret.
"""

import logging
from typing import Optional, Sequence

import jwt

from core.auth.models import CallerIdentity
from core.config_loader import HMAC_ALGORITHMS, AuthConfig
from core.exceptions import ConfigurationError, Unauthenticated

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the credential out of an Authorization header value.

    The "Bearer " prefix is stripped when present; anything else is passed
    through unchanged and left for the authenticator to reject.

    Raises:
        Unauthenticated: if the header is missing or blank.
    """
    if not authorization or not authorization.strip():
        raise Unauthenticated("Authorization header required")
    if authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return authorization


class Authenticator:
    """Verifies credentials against a process-wide shared secret."""

    def __init__(
        self,
        secret: str,
        algorithms: Sequence[str] = HMAC_ALGORITHMS,
        leeway_seconds: int = 0
    ):
        if not secret:
            raise ConfigurationError("JWT secret must not be empty")
        self._algorithms = tuple(alg for alg in algorithms if alg in HMAC_ALGORITHMS)
        if not self._algorithms:
            raise ConfigurationError(f"No HMAC algorithm configured (got {list(algorithms)})")
        self._secret = secret
        self._leeway = leeway_seconds

    @classmethod
    def from_config(cls, config: AuthConfig) -> "Authenticator":
        return cls(
            secret=config.jwt_secret,
            algorithms=config.algorithms,
            leeway_seconds=config.leeway_seconds
        )

    @property
    def algorithms(self) -> Sequence[str]:
        return self._algorithms

    def authenticate(self, credential: str) -> CallerIdentity:
        """
        Verify a credential and return the caller's identity.

        Args:
            credential: Compact JWT string.

        Returns:
            CallerIdentity decoded from the verified claims.

        Raises:
            Unauthenticated: for any malformed, mis-signed, expired or
                wrong-algorithm credential. The cause is logged, not exposed.
        """
        if not credential:
            raise Unauthenticated("Invalid token")

        try:
            header = jwt.get_unverified_header(credential)
            algorithm = header.get("alg")
            if algorithm not in self._algorithms:
                raise jwt.InvalidAlgorithmError(f"unexpected signing method: {algorithm}")

            claims = jwt.decode(
                credential,
                self._secret,
                algorithms=list(self._algorithms),
                leeway=self._leeway,
                options={"verify_aud": False}
            )
        except jwt.PyJWTError as e:
            logger.warning(f"Rejected credential: {e}")
            raise Unauthenticated("Invalid token") from e

        return CallerIdentity.from_claims(claims)
