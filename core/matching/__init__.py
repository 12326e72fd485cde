#!/usr/bin/env python3
"""
Program Matching Module - CRBI program scoring for client profiles.

Public API:
- ProgramMatchingService: Loads a client and the catalog, ranks programs
- qualify_client: Pure computation over already-loaded inputs
- ProgramMatch / ClientQualification: Result dataclasses

Modules:
- constants.py: Closed enumerations and business lookup tables
- models.py: Input records (pydantic) and results (dataclasses)
- program_score.py: Per-program weighted score
- client_score.py: Program-independent readiness score
- advice.py: Requirements, recommendations, next steps, risk factors
- service.py: ProgramMatchingService orchestrator
"""

from core.matching.models import (
    ClientProfile,
    ClientQualification,
    InvestmentOptionRecord,
    ProgramMatch,
    ProgramRecord,
)
from core.matching.exceptions import ClientNotFoundError, InvalidClientProfileError, MatchingError
from core.matching.service import ProgramMatchingService, qualify_client

__all__ = [
    'ProgramMatchingService',
    'qualify_client',
    'ClientProfile',
    'ProgramRecord',
    'InvestmentOptionRecord',
    'ProgramMatch',
    'ClientQualification',
    'MatchingError',
    'ClientNotFoundError',
    'InvalidClientProfileError',
]
