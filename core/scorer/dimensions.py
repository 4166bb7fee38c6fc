#!/usr/bin/env python3
"""
Dimension Scorers - technical, commercial and financial scores.

Each scorer maps a proposal document to a score in [0, 1]. Scorers start
from a base score and add fixed bonuses when a field is present, well-typed
and past its threshold; anything else leaves the base untouched.

The criteria mapping is accepted by every scorer so rule parameters can be
introduced without changing signatures. No current rule reads it.
"""

from typing import Any, Mapping, Optional

from core.scorer.fields import lookup_list, lookup_number

# Technical
TECHNICAL_BASE_SCORE = 0.7
EXPERIENCE_BONUS = 0.2
EXPERIENCE_MIN_YEARS = 5  # strictly greater than
CERTIFICATIONS_BONUS = 0.1
CERTIFICATIONS_MIN_COUNT = 3  # strictly greater than

# Commercial
COMMERCIAL_BASE_SCORE = 0.6
DELIVERY_BONUS = 0.3
DELIVERY_MAX_DAYS = 30
WARRANTY_BONUS = 0.1
WARRANTY_MIN_MONTHS = 12

# Financial: (inclusive upper price bound, score), checked in order
FINANCIAL_BASE_SCORE = 0.5
FINANCIAL_PRICE_TIERS = (
    (100_000, 1.0),
    (500_000, 0.8),
    (1_000_000, 0.6),
)
FINANCIAL_TOP_TIER_SCORE = 0.3

MAX_DIMENSION_SCORE = 1.0


def calculate_technical_score(
    proposal: Mapping[str, Any],
    criteria: Optional[Mapping[str, Any]] = None
) -> float:
    """Base 0.7, +0.2 for more than 5 years experience, +0.1 for more than 3 certifications."""
    score = TECHNICAL_BASE_SCORE

    if lookup_number(proposal, "experience").satisfies(lambda years: years > EXPERIENCE_MIN_YEARS):
        score += EXPERIENCE_BONUS

    if lookup_list(proposal, "certifications").satisfies(lambda certs: len(certs) > CERTIFICATIONS_MIN_COUNT):
        score += CERTIFICATIONS_BONUS

    return min(score, MAX_DIMENSION_SCORE)


def calculate_commercial_score(
    proposal: Mapping[str, Any],
    criteria: Optional[Mapping[str, Any]] = None
) -> float:
    """Base 0.6, +0.3 for delivery within 30 days, +0.1 for a warranty of 12 months or more."""
    score = COMMERCIAL_BASE_SCORE

    if lookup_number(proposal, "deliveryTime").satisfies(lambda days: days <= DELIVERY_MAX_DAYS):
        score += DELIVERY_BONUS

    if lookup_number(proposal, "warranty").satisfies(lambda months: months >= WARRANTY_MIN_MONTHS):
        score += WARRANTY_BONUS

    return min(score, MAX_DIMENSION_SCORE)


def calculate_financial_score(
    proposal: Mapping[str, Any],
    criteria: Optional[Mapping[str, Any]] = None
) -> float:
    """
    Step function of totalPrice: cheaper bids score higher.

    Without a numeric totalPrice the score stays at the 0.5 base.
    """
    price = lookup_number(proposal, "totalPrice")
    if not price.is_valid:
        return FINANCIAL_BASE_SCORE

    for upper_bound, tier_score in FINANCIAL_PRICE_TIERS:
        if price.value <= upper_bound:
            return tier_score
    return FINANCIAL_TOP_TIER_SCORE
