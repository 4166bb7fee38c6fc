#!/usr/bin/env python3
"""
Authorizer - exact-match role gate.

Roles are compared case-sensitively with no hierarchy: "ADMIN" is only
admitted where it is listed explicitly.
"""

from typing import Iterable

from core.exceptions import Forbidden

SCORING_ROLES = ("USER", "ADMIN")


def is_permitted(role: str, permitted_roles: Iterable[str]) -> bool:
    return any(role == permitted for permitted in permitted_roles)


def authorize(role: str, permitted_roles: Iterable[str]) -> None:
    """
    Admit the caller or raise.

    Raises:
        Forbidden: if role is not one of permitted_roles.
    """
    permitted_roles = tuple(permitted_roles)
    if not is_permitted(role, permitted_roles):
        raise Forbidden(f"Access denied. Required roles: {', '.join(permitted_roles)}")
