"""API route handlers."""

from .qualification import router as qualification_router
from .programs import router as programs_router
