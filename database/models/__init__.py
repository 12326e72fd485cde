from .base import Base
from .firm import Firm
from .client import Client
from .program import CrbiProgram, InvestmentOption

__all__ = [
    'Base',
    'Firm',
    'Client',
    'CrbiProgram',
    'InvestmentOption',
]
