#!/usr/bin/env python3
"""
Program Matching Service - rank CRBI programs for a client.

Loads the client profile and the active program catalog, scores every
program, drops weak matches and returns the best few together with an
overall readiness score and advisory text.

Read-only: the service never writes to the store.
"""

from typing import Any, Dict, List, Optional, Sequence
import logging
import uuid

from pydantic import ValidationError

from core.config_loader import MatchingConfig
from core.matching.models import (
    ClientProfile,
    ClientQualification,
    InvestmentOptionRecord,
    ProgramMatch,
    ProgramRecord,
)
from core.matching.exceptions import ClientNotFoundError, InvalidClientProfileError
from core.matching import advice
from core.matching.client_score import calculate_overall_client_score
from core.matching.program_score import score_program

logger = logging.getLogger(__name__)


def rank_program_matches(
    matches: List[ProgramMatch],
    min_match_score: int,
    top_k: int
) -> List[ProgramMatch]:
    """Drop matches at or below min_match_score, sort best-first, truncate to top_k.

    Equal scores are ordered by program id so the result does not depend on
    catalog iteration order.
    """
    kept = [m for m in matches if m.match_score > min_match_score]
    kept.sort(key=lambda m: (-m.match_score, str(m.program.id)))
    return kept[:top_k]


def qualify_client(
    profile: ClientProfile,
    programs: Sequence[ProgramRecord],
    options_by_program: Optional[Dict[uuid.UUID, List[InvestmentOptionRecord]]] = None,
    config: Optional[MatchingConfig] = None
) -> ClientQualification:
    """
    Compute the full qualification for a client against a program catalog.

    Args:
        profile: Validated client profile.
        programs: Candidate programs; inactive ones are skipped.
        options_by_program: Active investment options keyed by program id.
        config: Matching thresholds; defaults apply when omitted.

    Returns: ClientQualification
    """
    config = config or MatchingConfig()
    options_by_program = options_by_program or {}

    matches = [
        score_program(
            profile,
            program,
            options_by_program.get(program.id, []),
            config.eligibility
        )
        for program in programs
        if program.is_active
    ]
    ranked = rank_program_matches(matches, config.min_match_score, config.top_k)

    overall_score, components = calculate_overall_client_score(profile)

    return ClientQualification(
        client_id=profile.id,
        overall_score=overall_score,
        program_matches=ranked,
        recommendations=advice.generate_recommendations(profile, ranked, config.eligibility),
        next_steps=advice.generate_next_steps(profile, ranked),
        risk_factors=advice.identify_risk_factors(profile),
        score_components=components,
    )


class ProgramMatchingService:
    """
    Orchestrates program matching for a stored client.

    Collaborators:
        client_repo: provides get_client_by_id(client_id)
        program_repo: provides list_active_programs() and
            list_active_investment_options(program_ids)
    """

    def __init__(self, client_repo: Any, program_repo: Any, config: Optional[MatchingConfig] = None):
        self.client_repo = client_repo
        self.program_repo = program_repo
        self.config = config or MatchingConfig()

    def load_profile(self, client_id: Any) -> ClientProfile:
        client = self.client_repo.get_client_by_id(client_id)
        if client is None:
            raise ClientNotFoundError(client_id)

        try:
            return ClientProfile.model_validate(client)
        except ValidationError as e:
            raise InvalidClientProfileError(
                f"Client {client_id} has an invalid profile: {e.error_count()} invalid field(s)"
            ) from e

    def match_programs_for_client(self, client_id: Any) -> ClientQualification:
        """
        Rank active CRBI programs for the given client.

        Raises:
            ClientNotFoundError: If the client does not exist.
            InvalidClientProfileError: If a stored enum value is out of range.
        """
        profile = self.load_profile(client_id)

        programs = [
            ProgramRecord.model_validate(row)
            for row in self.program_repo.list_active_programs()
        ]
        raw_options = self.program_repo.list_active_investment_options(
            [program.id for program in programs]
        )
        options_by_program = {
            program_id: [InvestmentOptionRecord.model_validate(opt) for opt in options]
            for program_id, options in raw_options.items()
        }

        qualification = qualify_client(profile, programs, options_by_program, self.config)

        logger.info(
            "Matched %d/%d programs for client %s (overall score %d)",
            len(qualification.program_matches), len(programs),
            client_id, qualification.overall_score
        )
        return qualification
