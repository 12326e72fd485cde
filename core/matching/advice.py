#!/usr/bin/env python3
"""
Advisory text - requirements, recommendations, next steps and risk factors.

Presentation strings selected by simple conditions on the client profile and
the ranked program matches.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Sequence

from core.config_loader import EligibilityThresholds
from core.matching.constants import BudgetRange, FundsReadiness, ProgramType, SanctionsScreening
from core.matching.models import ClientProfile, ProgramRecord

STANDARD_REQUIREMENTS = (
    'Clean criminal background check',
    'Source of funds documentation',
    'Medical examination',
    'Valid passport',
)

CITIZENSHIP_REQUIREMENTS = (
    'Oath of allegiance',
    'Residency requirements (if applicable)',
)


def format_usd(amount: Decimal) -> str:
    """Format US dollars with up to two decimals, e.g. $1,250,000 or $250,000.5."""
    cents = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return "$" + f"{cents:,.2f}".rstrip("0").rstrip(".")


def program_requirements(program: ProgramRecord) -> List[str]:
    requirements = list(STANDARD_REQUIREMENTS)
    if program.program_type == ProgramType.CITIZENSHIP:
        requirements.extend(CITIZENSHIP_REQUIREMENTS)
    requirements.append(f"Minimum investment of {format_usd(program.min_investment)}")
    return requirements


def generate_recommendations(
    profile: ClientProfile,
    program_matches: Sequence,
    thresholds: EligibilityThresholds
) -> List[str]:
    """
    Recommendations driven by the top-ranked match and the budget range.

    program_matches must already be sorted best-first.
    """
    if not program_matches:
        return ['Complete client profile to identify suitable programs']

    recommendations = []
    top_match = program_matches[0]
    name = top_match.program.program_name

    if top_match.match_score >= thresholds.qualified:
        recommendations.append(f"{name} is an excellent match for your profile")
    elif top_match.match_score >= thresholds.likely_qualified:
        recommendations.append(f"Consider {name} as a strong option")
        recommendations.append('Review program requirements and timeline carefully')
    else:
        recommendations.append('Multiple programs may be suitable - detailed consultation recommended')

    if profile.budget_range == BudgetRange.UNDER_500K:
        recommendations.append('Focus on government bond and donation-based programs')
    elif profile.budget_range == BudgetRange.OVER_2M:
        recommendations.append('Premium real estate and business investment options available')

    return recommendations


def generate_next_steps(profile: ClientProfile, program_matches: Sequence) -> List[str]:
    next_steps = []

    if profile.source_of_funds_readiness != FundsReadiness.READY:
        next_steps.append('Prepare source of funds documentation')

    if profile.sanctions_screening != SanctionsScreening.CLEARED:
        next_steps.append('Complete sanctions and PEP screening')

    if program_matches:
        next_steps.append('Schedule consultation to discuss top program matches')
        next_steps.append('Review investment options and timelines')

    next_steps.append('Prepare preliminary application documents')
    return next_steps


def identify_risk_factors(profile: ClientProfile) -> List[str]:
    risk_factors = []

    if profile.visa_denials:
        risk_factors.append('Previous visa denials may require additional documentation')
    if profile.criminal_background:
        risk_factors.append('Criminal background requires careful evaluation')
    if profile.is_pep:
        risk_factors.append('PEP status requires enhanced due diligence')
    if profile.source_of_funds_readiness == FundsReadiness.NOT_READY:
        risk_factors.append('Source of funds documentation not yet prepared')

    return risk_factors
