"""Business logic services."""

from .qualification_service import QualificationService
from .program_service import ProgramCatalogService
