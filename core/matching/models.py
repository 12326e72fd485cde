#!/usr/bin/env python3
"""
Matching Models - input records and computed results.

Inputs (ClientProfile, ProgramRecord, InvestmentOptionRecord) are pydantic
models validated from ORM rows, so closed enumerations are checked at the
boundary. Results (ProgramMatch, ClientQualification) are plain dataclasses.
"""

import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from core.matching.constants import (
    BudgetRange,
    DesiredTimeline,
    EligibilityStatus,
    EmploymentStatus,
    FundsReadiness,
    ProgramType,
    SanctionsScreening,
    UrgencyLevel,
)


class ClientProfile(BaseModel):
    """Scoring view of a client record."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    current_citizenships: List[str] = []

    geographic_preferences: List[str] = []
    budget_range: Optional[BudgetRange] = None
    desired_timeline: Optional[DesiredTimeline] = None
    urgency_level: Optional[UrgencyLevel] = None
    primary_goals: List[str] = []

    employment_status: Optional[EmploymentStatus] = None
    current_profession: Optional[str] = None
    industry: Optional[str] = None
    years_of_experience: Optional[int] = None

    source_of_funds_readiness: Optional[FundsReadiness] = None
    sanctions_screening: Optional[SanctionsScreening] = None
    criminal_background: bool = False
    visa_denials: bool = False
    is_pep: bool = False

    @field_validator(
        'first_name', 'last_name', 'email', 'phone',
        'budget_range', 'desired_timeline', 'urgency_level',
        'employment_status', 'current_profession', 'industry',
        'source_of_funds_readiness', 'sanctions_screening',
        mode='before'
    )
    @classmethod
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator(
        'current_citizenships', 'geographic_preferences', 'primary_goals',
        mode='before'
    )
    @classmethod
    def _none_to_empty_list(cls, v: Any) -> Any:
        if v is None:
            return []
        return [item for item in v if item]

    @field_validator('criminal_background', 'visa_denials', 'is_pep', mode='before')
    @classmethod
    def _none_to_false(cls, v: Any) -> Any:
        return False if v is None else v


class ProgramRecord(BaseModel):
    """A CRBI program from the catalog."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID
    country_code: Optional[str] = None
    country_name: str
    program_name: str
    program_type: ProgramType
    min_investment: Decimal
    processing_time_months: Optional[int] = None
    program_details: Optional[Any] = None
    is_active: bool = True


class InvestmentOptionRecord(BaseModel):
    """An active investment route offered by a program."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID
    program_id: uuid.UUID
    option_name: str
    option_type: str
    base_amount: Decimal
    description: Optional[str] = None
    holding_period_months: Optional[int] = None
    sort_order: int = 0


@dataclass
class ProgramMatch:
    """Compatibility of one program with one client."""
    program: ProgramRecord

    match_score: int = 0
    match_reasons: List[str] = field(default_factory=list)
    investment_options: List[InvestmentOptionRecord] = field(default_factory=list)
    estimated_timeline: str = ""
    eligibility_status: EligibilityStatus = EligibilityStatus.NOT_QUALIFIED
    requirements: List[str] = field(default_factory=list)
    considerations: List[str] = field(default_factory=list)

    # Points earned per factor, before rounding and clamping
    score_components: Dict[str, float] = field(default_factory=dict)


@dataclass
class ClientQualification:
    """Full qualification result for a client."""
    client_id: uuid.UUID

    overall_score: int = 0
    program_matches: List[ProgramMatch] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    next_steps: List[str] = field(default_factory=list)
    risk_factors: List[str] = field(default_factory=list)
    score_components: Dict[str, int] = field(default_factory=dict)
