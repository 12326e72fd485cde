#!/usr/bin/env python3
"""
Client Score - program-independent readiness of a client (0-100).

Components:
- Profile completeness (30)
- Financial readiness (25)
- Timeline readiness (20)
- Professional background (15)
- Compliance readiness (10)
"""

from typing import Dict, Tuple

from core.matching.constants import (
    HIGH_URGENCY,
    MAX_SCORE,
    FundsReadiness,
    SanctionsScreening,
)
from core.matching.models import ClientProfile

COMPLETENESS_FIELDS = (
    'first_name', 'last_name', 'email', 'phone',
    'current_citizenships', 'employment_status', 'primary_goals',
    'desired_timeline', 'source_of_funds_readiness', 'budget_range',
)

FUNDS_READINESS_POINTS: Dict[FundsReadiness, int] = {
    FundsReadiness.READY: 15,
    FundsReadiness.ONE_MONTH: 12,
    FundsReadiness.THREE_MONTHS: 8,
    FundsReadiness.SIX_MONTHS: 5,
}


def calculate_profile_completeness(profile: ClientProfile) -> int:
    populated = sum(1 for name in COMPLETENESS_FIELDS if getattr(profile, name))
    return min(populated * 3, 30)


def calculate_financial_readiness(profile: ClientProfile) -> int:
    score = FUNDS_READINESS_POINTS.get(profile.source_of_funds_readiness, 0)
    if profile.budget_range is not None:
        score += 10
    return score


def calculate_timeline_readiness(profile: ClientProfile) -> int:
    score = 0
    if profile.desired_timeline is not None:
        score += 10
    if profile.urgency_level in HIGH_URGENCY:
        score += 10
    return score


def calculate_professional_score(profile: ClientProfile) -> int:
    score = 0
    if profile.employment_status is not None:
        score += 5
    if profile.current_profession:
        score += 5
    if profile.years_of_experience is not None and profile.years_of_experience > 5:
        score += 5
    return score


def calculate_compliance_readiness(profile: ClientProfile) -> int:
    score = 0
    if profile.sanctions_screening == SanctionsScreening.CLEARED:
        score += 5
    if not profile.criminal_background:
        score += 3
    if not profile.visa_denials:
        score += 2
    return score


def calculate_overall_client_score(profile: ClientProfile) -> Tuple[int, Dict[str, int]]:
    """
    Returns: (overall_score, components)
    """
    components = {
        'profile_completeness': calculate_profile_completeness(profile),
        'financial_readiness': calculate_financial_readiness(profile),
        'timeline_readiness': calculate_timeline_readiness(profile),
        'professional': calculate_professional_score(profile),
        'compliance': calculate_compliance_readiness(profile),
    }
    return min(sum(components.values()), MAX_SCORE), components
