#!/usr/bin/env python3
"""
Program Score - weighted compatibility between a client and one program.

Factors (points):
- Geography (25): preferred region contains the program's country
- Budget (25): program minimum investment against the client's budget band
- Timeline (20): processing time against the client's desired timeline
- Goals (15): program type compatible with the client's goals
- Professional (10): stable employment, known profession and industry
- Funds (5): source of funds documentation ready

Each factor is capped independently; the total is rounded and clamped to 0-100.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence

from core.config_loader import EligibilityThresholds
from core.matching.constants import (
    BUDGET_BANDS,
    BUDGET_POINTS,
    FUNDS_POINTS,
    FUNDS_READY_LEVELS,
    GEOGRAPHY_POINTS,
    GOAL_PROGRAM_TYPES,
    GOALS_POINTS,
    MAX_SCORE,
    REGION_COUNTRIES,
    STABLE_EMPLOYMENT,
    TIMELINE_EXPECTED_MONTHS,
    TIMELINE_POINTS,
    BudgetRange,
    DesiredTimeline,
    EligibilityStatus,
    EmploymentStatus,
    FundsReadiness,
    ProgramType,
)
from core.matching.models import ClientProfile, InvestmentOptionRecord, ProgramMatch, ProgramRecord
from core.matching import advice

logger = logging.getLogger(__name__)


def _clamp_score(total: float) -> int:
    rounded = int(Decimal(str(total)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))
    return max(0, min(MAX_SCORE, rounded))


def get_region_matches(country_name: str, preferences: Sequence[str]) -> List[str]:
    """Return the preferred regions whose country list includes country_name."""
    return [
        region for region in preferences
        if country_name in REGION_COUNTRIES.get(region, ())
    ]


def calculate_budget_compatibility(
    budget_range: Optional[BudgetRange],
    min_investment: Decimal
) -> int:
    if budget_range is None:
        return 0

    band = BUDGET_BANDS[budget_range]
    amount = Decimal(min_investment)

    # Open-ended band: anything at or above 80% of the floor fits
    if band.max is None:
        return BUDGET_POINTS if amount >= band.min * Decimal('0.8') else 15

    if band.min * Decimal('0.8') <= amount <= band.max:
        return BUDGET_POINTS
    if amount <= band.max * Decimal('1.2'):
        return 15
    if amount <= band.max * Decimal('1.5'):
        return 8
    return 0


def calculate_timeline_compatibility(
    desired_timeline: Optional[DesiredTimeline],
    processing_time_months: Optional[int]
) -> int:
    if desired_timeline is None or processing_time_months is None:
        return 0

    expected = TIMELINE_EXPECTED_MONTHS[desired_timeline]
    if processing_time_months <= expected:
        return TIMELINE_POINTS
    if processing_time_months <= expected * 1.5:
        return 12
    if processing_time_months <= expected * 2:
        return 6
    return 0


def calculate_goal_alignment(primary_goals: Sequence[str], program_type: ProgramType) -> float:
    if not primary_goals:
        return 0.0

    share = GOALS_POINTS / len(primary_goals)
    score = sum(
        share for goal in primary_goals
        if program_type in GOAL_PROGRAM_TYPES.get(goal, frozenset())
    )
    return min(score, float(GOALS_POINTS))


def calculate_professional_compatibility(
    employment_status: Optional[EmploymentStatus],
    profession: Optional[str],
    industry: Optional[str]
) -> int:
    score = 0
    if employment_status in STABLE_EMPLOYMENT:
        score += 5
    if profession and industry:
        score += 5
    return score


def calculate_funds_readiness(readiness: Optional[FundsReadiness]) -> int:
    return FUNDS_POINTS if readiness in FUNDS_READY_LEVELS else 0


def determine_eligibility_status(
    match_score: int,
    thresholds: EligibilityThresholds
) -> EligibilityStatus:
    if match_score >= thresholds.qualified:
        return EligibilityStatus.QUALIFIED
    if match_score >= thresholds.likely_qualified:
        return EligibilityStatus.LIKELY_QUALIFIED
    if match_score >= thresholds.needs_review:
        return EligibilityStatus.NEEDS_REVIEW
    return EligibilityStatus.NOT_QUALIFIED


def calculate_estimated_timeline(
    processing_time_months: Optional[int],
    readiness: Optional[FundsReadiness]
) -> str:
    if processing_time_months is None:
        return "Processing time to be confirmed"

    months = processing_time_months
    if readiness == FundsReadiness.READY:
        months -= 1
    elif readiness == FundsReadiness.NOT_READY:
        months += 3
    return f"{months} months (estimated)"


def score_program(
    profile: ClientProfile,
    program: ProgramRecord,
    investment_options: Optional[List[InvestmentOptionRecord]] = None,
    thresholds: Optional[EligibilityThresholds] = None
) -> ProgramMatch:
    """
    Score a single program against a client profile.

    Args:
        profile: Validated client profile.
        program: Active catalog program.
        investment_options: Active options for the program, already ordered.
        thresholds: Eligibility cutoffs; defaults to 80/60/40.

    Returns: ProgramMatch with score, reasons, considerations and requirements.
    """
    thresholds = thresholds or EligibilityThresholds()
    reasons: List[str] = []
    considerations: List[str] = []
    components: Dict[str, float] = {}

    regions = get_region_matches(program.country_name, profile.geographic_preferences)
    components['geography'] = GEOGRAPHY_POINTS if regions else 0
    if regions:
        reasons.append(f"Geographic preference match: {', '.join(regions)}")

    budget = calculate_budget_compatibility(profile.budget_range, program.min_investment)
    components['budget'] = budget
    if budget > 15:
        reasons.append('Investment budget aligns with program requirements')
    elif budget > 0:
        considerations.append('Investment budget may require adjustment')

    timeline = calculate_timeline_compatibility(
        profile.desired_timeline,
        program.processing_time_months
    )
    components['timeline'] = timeline
    if timeline > 15:
        reasons.append('Processing timeline matches client expectations')
    elif timeline > 5:
        considerations.append('Processing timeline may exceed desired timeframe')

    goals = calculate_goal_alignment(profile.primary_goals, program.program_type)
    components['goals'] = goals
    if goals > 10:
        reasons.append('Program type aligns with client goals')

    components['professional'] = calculate_professional_compatibility(
        profile.employment_status,
        profile.current_profession,
        profile.industry
    )

    funds = calculate_funds_readiness(profile.source_of_funds_readiness)
    components['funds'] = funds
    if funds:
        reasons.append('Source of funds documentation ready')
    elif profile.source_of_funds_readiness == FundsReadiness.NOT_READY:
        considerations.append('Source of funds documentation needs preparation')

    match_score = _clamp_score(sum(components.values()))

    logger.debug(
        "Scored program %s (%s) for client %s: %d %s",
        program.id, program.program_name, profile.id, match_score, components
    )

    return ProgramMatch(
        program=program,
        match_score=match_score,
        match_reasons=reasons,
        investment_options=list(investment_options or []),
        estimated_timeline=calculate_estimated_timeline(
            program.processing_time_months,
            profile.source_of_funds_readiness
        ),
        eligibility_status=determine_eligibility_status(match_score, thresholds),
        requirements=advice.program_requirements(program),
        considerations=considerations,
        score_components=components,
    )
