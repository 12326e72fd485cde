#!/usr/bin/env python3
"""
Program service - read access to the CRBI program catalog.
"""

import logging
from typing import Any, List
from sqlalchemy.orm import Session

from database.repositories import ProgramRepository
from ..models.responses import (
    ProgramSummary,
    InvestmentOptionSummary,
    InvestmentOptionsResponse,
)
from ..utils import safe_float, safe_str
from ..exceptions import ProgramNotFoundException

logger = logging.getLogger(__name__)


def to_program_summary(program: Any) -> ProgramSummary:
    """Convert a program (ORM row or ProgramRecord) to its API summary."""
    program_type = program.program_type
    return ProgramSummary(
        program_id=safe_str(program.id),
        country_code=program.country_code,
        country_name=program.country_name,
        program_name=program.program_name,
        program_type=getattr(program_type, 'value', program_type),
        min_investment=safe_float(program.min_investment),
        processing_time_months=program.processing_time_months,
        program_details=program.program_details,
    )


def to_option_summary(option: Any) -> InvestmentOptionSummary:
    """Convert an investment option (ORM row or record) to its API summary."""
    return InvestmentOptionSummary(
        option_id=safe_str(option.id),
        option_name=option.option_name,
        option_type=option.option_type,
        base_amount=safe_float(option.base_amount),
        description=option.description,
        holding_period_months=option.holding_period_months,
    )


class ProgramCatalogService:
    """Service for browsing CRBI programs and their investment options."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProgramRepository(db)

    def list_programs(self) -> List[ProgramSummary]:
        """
        Get all active programs, highest minimum investment first.

        Returns:
            List of program summaries.
        """
        return [to_program_summary(p) for p in self.repo.list_active_programs()]

    def get_program(self, program_id: str) -> ProgramSummary:
        """
        Get a single program.

        Raises:
            ProgramNotFoundException: If program is not found.
        """
        program = self.repo.get_program_by_id(program_id)
        if not program:
            raise ProgramNotFoundException(f"CRBI program {program_id} not found")
        return to_program_summary(program)

    def get_investment_options(self, program_id: str) -> InvestmentOptionsResponse:
        """
        Get the active investment options of a program, in display order.

        Raises:
            ProgramNotFoundException: If program is not found.
        """
        program = self.repo.get_program_by_id(program_id)
        if not program:
            raise ProgramNotFoundException(f"CRBI program {program_id} not found")

        options = self.repo.list_active_investment_options([program.id]).get(program.id, [])
        summaries = [to_option_summary(o) for o in options]

        return InvestmentOptionsResponse(
            success=True,
            program=to_program_summary(program),
            investment_options=summaries,
            count=len(summaries)
        )
