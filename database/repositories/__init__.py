from database.repositories.base import BaseRepository
from database.repositories.client import ClientRepository
from database.repositories.program import ProgramRepository

__all__ = [
    'BaseRepository',
    'ClientRepository',
    'ProgramRepository',
]
