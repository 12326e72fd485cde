#!/usr/bin/env python3
"""
Program endpoints - browse the CRBI program catalog.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.program_service import ProgramCatalogService
from ..models.responses import (
    ProgramsResponse,
    ProgramDetailResponse,
    InvestmentOptionsResponse
)
from ..utils import validate_uuid

router = APIRouter(prefix="/api/crbi-programs", tags=["programs"])


@router.get("", response_model=ProgramsResponse)
def list_programs(db: Session = Depends(get_db)):
    """
    Get all active CRBI programs, highest minimum investment first.
    """
    service = ProgramCatalogService(db)
    programs = service.list_programs()

    return ProgramsResponse(
        success=True,
        count=len(programs),
        programs=programs
    )


@router.get("/{program_id}", response_model=ProgramDetailResponse)
def get_program(
    program_id: str,
    db: Session = Depends(get_db)
):
    """Get a single CRBI program."""
    validate_uuid(program_id, "program_id")
    service = ProgramCatalogService(db)

    return ProgramDetailResponse(
        success=True,
        program=service.get_program(program_id)
    )


@router.get("/{program_id}/investment-options", response_model=InvestmentOptionsResponse)
def get_investment_options(
    program_id: str,
    db: Session = Depends(get_db)
):
    """
    Get the active investment options of a program, in display order.
    """
    validate_uuid(program_id, "program_id")
    service = ProgramCatalogService(db)
    return service.get_investment_options(program_id)
