#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class ProgramSummary(BaseModel):
    """Summary of a CRBI program."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "program_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "country_code": "KN",
                "country_name": "St. Kitts and Nevis",
                "program_name": "St. Kitts & Nevis Citizenship by Investment",
                "program_type": "citizenship",
                "min_investment": 250000.0,
                "processing_time_months": 4,
                "program_details": {}
            }
        }
    )

    program_id: str
    country_code: Optional[str] = None
    country_name: str
    program_name: str
    program_type: str
    min_investment: float = Field(ge=0)
    processing_time_months: Optional[int] = None
    program_details: Optional[Any] = None


class InvestmentOptionSummary(BaseModel):
    """An active investment option of a program."""
    option_id: str
    option_name: str
    option_type: str
    base_amount: float = Field(ge=0)
    description: Optional[str] = None
    holding_period_months: Optional[int] = None


class ProgramMatchResult(BaseModel):
    """Compatibility of one program with the client."""
    program: ProgramSummary
    match_score: int = Field(ge=0, le=100)
    match_reasons: List[str]
    investment_options: List[InvestmentOptionSummary]
    estimated_timeline: str
    eligibility_status: str  # "qualified", "likely_qualified", "needs_review", "not_qualified"
    requirements: List[str]
    considerations: List[str]
    score_components: Dict[str, float] = Field(default_factory=dict)


class ClientQualificationResult(BaseModel):
    """Full qualification of a client."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "client_id": "550e8400-e29b-41d4-a716-446655440000",
                "overall_score": 72,
                "program_matches": [],
                "recommendations": ["Complete client profile to identify suitable programs"],
                "next_steps": ["Prepare preliminary application documents"],
                "risk_factors": [],
                "score_components": {
                    "profile_completeness": 24,
                    "financial_readiness": 25,
                    "timeline_readiness": 10,
                    "professional": 5,
                    "compliance": 8
                }
            }
        }
    )

    client_id: str
    overall_score: int = Field(ge=0, le=100)
    program_matches: List[ProgramMatchResult]
    recommendations: List[str]
    next_steps: List[str]
    risk_factors: List[str]
    score_components: Dict[str, int] = Field(default_factory=dict)


class QualificationResponse(BaseModel):
    """Response containing a client's program matches."""
    success: bool
    qualification: ClientQualificationResult


class ProgramsResponse(BaseModel):
    """Response containing the active program catalog."""
    success: bool
    count: int
    programs: List[ProgramSummary]


class ProgramDetailResponse(BaseModel):
    """Response containing a single program."""
    success: bool
    program: ProgramSummary


class InvestmentOptionsResponse(BaseModel):
    """Response containing a program's active investment options."""
    success: bool
    program: ProgramSummary
    investment_options: List[InvestmentOptionSummary]
    count: int
