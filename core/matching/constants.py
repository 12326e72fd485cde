#!/usr/bin/env python3
"""
Matching Constants - closed enumerations and business lookup tables.

The lookup tables are business configuration: region -> countries,
goal -> compatible program types, budget range -> investment band and
desired timeline -> expected months.
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, NamedTuple, Optional, Tuple


class BudgetRange(str, Enum):
    UNDER_500K = "under_500k"
    FROM_500K_TO_1M = "500k_1m"
    FROM_1M_TO_2M = "1m_2m"
    OVER_2M = "2m_plus"


class DesiredTimeline(str, Enum):
    IMMEDIATE = "immediate"
    SIX_MONTHS = "6_months"
    ONE_YEAR = "1_year"
    TWO_YEARS = "2_years"
    EXPLORING = "exploring"


class UrgencyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class FundsReadiness(str, Enum):
    READY = "ready"
    ONE_MONTH = "1_month"
    THREE_MONTHS = "3_months"
    SIX_MONTHS = "6_months"
    NOT_READY = "not_ready"


class EmploymentStatus(str, Enum):
    EMPLOYED = "employed"
    SELF_EMPLOYED = "self_employed"
    BUSINESS_OWNER = "business_owner"
    RETIRED = "retired"
    UNEMPLOYED = "unemployed"


class SanctionsScreening(str, Enum):
    CLEARED = "cleared"
    PENDING = "pending"
    FLAGGED = "flagged"


class ProgramType(str, Enum):
    CITIZENSHIP = "citizenship"
    RESIDENCY = "residency"


class EligibilityStatus(str, Enum):
    QUALIFIED = "qualified"
    LIKELY_QUALIFIED = "likely_qualified"
    NEEDS_REVIEW = "needs_review"
    NOT_QUALIFIED = "not_qualified"


class BudgetBand(NamedTuple):
    min: Decimal
    max: Optional[Decimal]  # None = unbounded


# ----------------------------
# Factor weights (points)
# ----------------------------
GEOGRAPHY_POINTS = 25
BUDGET_POINTS = 25
TIMELINE_POINTS = 20
GOALS_POINTS = 15
PROFESSIONAL_POINTS = 10
FUNDS_POINTS = 5

MAX_SCORE = 100


REGION_COUNTRIES: Dict[str, Tuple[str, ...]] = {
    'Europe': ('Portugal', 'Spain', 'Greece', 'Malta', 'Cyprus', 'Austria', 'Ireland'),
    'Caribbean': ('St. Kitts and Nevis', 'Antigua and Barbuda', 'Dominica', 'Grenada', 'St. Lucia'),
    'Pacific': ('Vanuatu', 'Tonga'),
    'Americas': ('United States', 'Canada'),
    'Asia': ('Singapore', 'Malaysia'),
    'Middle East': ('UAE', 'Turkey'),
}

_BOTH_TYPES = frozenset({ProgramType.CITIZENSHIP, ProgramType.RESIDENCY})

GOAL_PROGRAM_TYPES: Dict[str, FrozenSet[ProgramType]] = {
    'global_mobility': _BOTH_TYPES,
    'tax_optimization': _BOTH_TYPES,
    'education': _BOTH_TYPES,
    'lifestyle': _BOTH_TYPES,
    'business_expansion': _BOTH_TYPES,
    'family_security': frozenset({ProgramType.CITIZENSHIP}),
}

BUDGET_BANDS: Dict[BudgetRange, BudgetBand] = {
    BudgetRange.UNDER_500K: BudgetBand(Decimal('0'), Decimal('500000')),
    BudgetRange.FROM_500K_TO_1M: BudgetBand(Decimal('500000'), Decimal('1000000')),
    BudgetRange.FROM_1M_TO_2M: BudgetBand(Decimal('1000000'), Decimal('2000000')),
    BudgetRange.OVER_2M: BudgetBand(Decimal('2000000'), None),
}

TIMELINE_EXPECTED_MONTHS: Dict[DesiredTimeline, int] = {
    DesiredTimeline.IMMEDIATE: 6,
    DesiredTimeline.SIX_MONTHS: 6,
    DesiredTimeline.ONE_YEAR: 12,
    DesiredTimeline.TWO_YEARS: 24,
    DesiredTimeline.EXPLORING: 36,
}

FUNDS_READY_LEVELS = frozenset({FundsReadiness.READY, FundsReadiness.ONE_MONTH})
STABLE_EMPLOYMENT = frozenset({EmploymentStatus.EMPLOYED, EmploymentStatus.BUSINESS_OWNER})
HIGH_URGENCY = frozenset({UrgencyLevel.HIGH, UrgencyLevel.URGENT})
