#!/usr/bin/env python3
"""
Qualification service - program matching for stored clients.
"""

import logging
from typing import Optional
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from core.matching import (
    ProgramMatchingService,
    ClientQualification,
    ProgramMatch,
    ClientNotFoundError,
    InvalidClientProfileError,
)
from database.repositories import ClientRepository, ProgramRepository
from ..models.responses import ClientQualificationResult, ProgramMatchResult
from ..exceptions import ClientNotFoundException, InvalidClientProfileException
from .program_service import to_program_summary, to_option_summary

logger = logging.getLogger(__name__)


class QualificationService:
    """Service for matching CRBI programs to a client."""

    def __init__(self, db: Session, config: Optional[MatchingConfig] = None):
        self.db = db
        self.matcher = ProgramMatchingService(
            client_repo=ClientRepository(db),
            program_repo=ProgramRepository(db),
            config=config
        )

    def get_program_matches(self, client_id: str) -> ClientQualificationResult:
        """
        Score the active program catalog for a client.

        Args:
            client_id: The client ID.

        Returns:
            Qualification with the top program matches.

        Raises:
            ClientNotFoundException: If client is not found.
            InvalidClientProfileException: If the stored profile has invalid values.
        """
        try:
            qualification = self.matcher.match_programs_for_client(client_id)
        except ClientNotFoundError as e:
            raise ClientNotFoundException(str(e)) from e
        except InvalidClientProfileError as e:
            raise InvalidClientProfileException(str(e)) from e

        return self._to_qualification_result(qualification)

    def _to_match_result(self, match: ProgramMatch) -> ProgramMatchResult:
        return ProgramMatchResult(
            program=to_program_summary(match.program),
            match_score=match.match_score,
            match_reasons=match.match_reasons,
            investment_options=[to_option_summary(o) for o in match.investment_options],
            estimated_timeline=match.estimated_timeline,
            eligibility_status=match.eligibility_status.value,
            requirements=match.requirements,
            considerations=match.considerations,
            score_components=match.score_components,
        )

    def _to_qualification_result(self, qualification: ClientQualification) -> ClientQualificationResult:
        return ClientQualificationResult(
            client_id=str(qualification.client_id),
            overall_score=qualification.overall_score,
            program_matches=[self._to_match_result(m) for m in qualification.program_matches],
            recommendations=qualification.recommendations,
            next_steps=qualification.next_steps,
            risk_factors=qualification.risk_factors,
            score_components=qualification.score_components,
        )
