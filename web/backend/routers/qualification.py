#!/usr/bin/env python3
"""
Qualification endpoints - match CRBI programs to a client.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config_loader import MatchingConfig
from ..dependencies import get_db, get_matching_config
from ..services.qualification_service import QualificationService
from ..models.responses import QualificationResponse
from ..utils import validate_uuid

router = APIRouter(prefix="/api/clients", tags=["qualification"])


@router.get("/{client_id}/program-matches", response_model=QualificationResponse)
def get_program_matches(
    client_id: str,
    db: Session = Depends(get_db),
    config: MatchingConfig = Depends(get_matching_config)
):
    """
    Rank active CRBI programs for a client.

    Returns the top program matches (best first) with eligibility, reasons
    and requirements, plus the client's overall readiness score,
    recommendations, next steps and risk factors.
    """
    validate_uuid(client_id, "client_id")
    service = QualificationService(db, config)
    qualification = service.get_program_matches(client_id)

    return QualificationResponse(
        success=True,
        qualification=qualification
    )
