#!/usr/bin/env python3
"""
Exceptions shared by the scoring engine and its transport layer.

Every error here is terminal: callers report it and never retry.
"""


class ScoringServiceError(Exception):
    """Base exception for bid scoring errors."""
    pass


class Unauthenticated(ScoringServiceError):
    """Raised when a credential is missing, malformed, expired or mis-signed."""
    pass


class Forbidden(ScoringServiceError):
    """Raised when a verified caller's role may not perform an operation."""
    pass


class InvalidInput(ScoringServiceError):
    """Raised when a bid or criteria payload cannot be decoded."""
    pass


class ConfigurationError(ScoringServiceError):
    """Raised when the service configuration is incomplete or invalid."""
    pass
