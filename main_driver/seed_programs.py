"""
Seed the CRBI program catalog.

Programs already present (same country_code and program_name) are left untouched,
so the script can be re-run safely.

Usage:
    python -m main_driver.seed_programs
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from database.database import db_session_scope
from database.models import CrbiProgram, InvestmentOption
from database.repositories import ProgramRepository

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


PROGRAM_CATALOG: List[Dict[str, Any]] = [
    {
        'program_name': 'Portugal Golden Visa',
        'country_code': 'PT',
        'country_name': 'Portugal',
        'program_type': 'residency',
        'min_investment': Decimal('250000'),
        'processing_time_months': 12,
        'program_details': {'path_to_citizenship_years': 5, 'has_digital_portal': True},
        'investment_options': [
            ('Investment Fund', 'Qualified Investment Fund', Decimal('250000'), 60,
             'Investment in Portuguese investment funds or venture capital funds'),
            ('Real Estate', 'Real Estate Investment', Decimal('400000'), 60,
             'Purchase of real estate property for residential rehabilitation'),
            ('Business Investment', 'Business Creation/Job Creation', Decimal('500000'), 60,
             'Creation of business activity with job creation (10+ jobs)'),
        ],
    },
    {
        'program_name': 'Greece Golden Visa',
        'country_code': 'GR',
        'country_name': 'Greece',
        'program_type': 'residency',
        'min_investment': Decimal('400000'),
        'processing_time_months': 9,
        'program_details': {'has_digital_portal': True},
        'investment_options': [
            ('Real Estate', 'Real Estate Investment (General)', Decimal('400000'), 60,
             'Real estate purchase outside the high-demand zones'),
            ('Real Estate', 'Real Estate Investment (Athens/Thessaloniki)', Decimal('800000'), 60,
             'Real estate purchase in Attica, Thessaloniki and the main islands'),
            ('Government Bonds', 'Greek Government Bonds', Decimal('400000'), 36,
             'Purchase of Greek government bonds'),
        ],
    },
    {
        'program_name': 'Grenada Citizenship by Investment',
        'country_code': 'GD',
        'country_name': 'Grenada',
        'program_type': 'citizenship',
        'min_investment': Decimal('150000'),
        'processing_time_months': 6,
        'program_details': {'e2_treaty': True},
        'investment_options': [
            ('Donation', 'National Transformation Fund', Decimal('150000'), 0,
             'Non-refundable contribution to the National Transformation Fund'),
            ('Real Estate', 'Approved Real Estate Investment', Decimal('270000'), 84,
             'Investment in a government-approved real estate project'),
        ],
    },
    {
        'program_name': 'St. Lucia Citizenship by Investment',
        'country_code': 'LC',
        'country_name': 'St. Lucia',
        'program_type': 'citizenship',
        'min_investment': Decimal('100000'),
        'processing_time_months': 6,
        'program_details': {},
        'investment_options': [
            ('Donation', 'National Economic Fund', Decimal('100000'), 0,
             'Contribution to the National Economic Fund'),
            ('Real Estate', 'Approved Real Estate', Decimal('300000'), 60,
             'Investment in an approved real estate development'),
        ],
    },
    {
        'program_name': 'Antigua & Barbuda Citizenship by Investment',
        'country_code': 'AG',
        'country_name': 'Antigua and Barbuda',
        'program_type': 'citizenship',
        'min_investment': Decimal('100000'),
        'processing_time_months': 6,
        'program_details': {},
        'investment_options': [
            ('Donation', 'National Development Fund', Decimal('100000'), 0,
             'Contribution to the National Development Fund'),
            ('Real Estate', 'Approved Real Estate Investment', Decimal('325000'), 60,
             'Investment in an approved real estate project'),
            ('Business Investment', 'Business Investment', Decimal('400000'), 60,
             'Investment in an approved business'),
        ],
    },
    {
        'program_name': 'Dominica Citizenship by Investment',
        'country_code': 'DM',
        'country_name': 'Dominica',
        'program_type': 'citizenship',
        'min_investment': Decimal('100000'),
        'processing_time_months': 8,
        'program_details': {},
        'investment_options': [
            ('Donation', 'Economic Diversification Fund', Decimal('100000'), 0,
             'Contribution to the Economic Diversification Fund'),
            ('Real Estate', 'Approved Real Estate', Decimal('200000'), 36,
             'Investment in approved real estate'),
        ],
    },
    {
        'program_name': 'St. Kitts & Nevis Citizenship by Investment',
        'country_code': 'KN',
        'country_name': 'St. Kitts and Nevis',
        'program_type': 'citizenship',
        'min_investment': Decimal('250000'),
        'processing_time_months': 4,
        'program_details': {},
        'investment_options': [
            ('Donation', 'Sustainable Island State Contribution (SISC)', Decimal('250000'), 0,
             'Contribution to the Sustainable Island State fund'),
            ('Real Estate', 'Approved Real Estate Investment', Decimal('400000'), 84,
             'Investment in approved real estate'),
        ],
    },
    {
        'program_name': 'Vanuatu Citizenship by Investment',
        'country_code': 'VU',
        'country_name': 'Vanuatu',
        'program_type': 'citizenship',
        'min_investment': Decimal('130000'),
        'processing_time_months': 3,
        'program_details': {},
        'investment_options': [
            ('Donation', 'Development Support Program', Decimal('130000'), 0,
             'Contribution to the Development Support Program'),
        ],
    },
    {
        'program_name': 'Turkey Citizenship by Investment',
        'country_code': 'TR',
        'country_name': 'Turkey',
        'program_type': 'citizenship',
        'min_investment': Decimal('400000'),
        'processing_time_months': 8,
        'program_details': {},
        'investment_options': [
            ('Real Estate', 'Real Estate Investment', Decimal('400000'), 36,
             'Purchase of real estate with a 3-year holding commitment'),
            ('Bank Deposit', 'Bank Deposit', Decimal('500000'), 36,
             'Deposit held in a Turkish bank'),
        ],
    },
]


def build_program(entry: Dict[str, Any]) -> CrbiProgram:
    """Build a CrbiProgram with its investment options from a catalog entry."""
    program = CrbiProgram(
        country_code=entry['country_code'],
        country_name=entry['country_name'],
        program_type=entry['program_type'],
        program_name=entry['program_name'],
        min_investment=entry['min_investment'],
        processing_time_months=entry['processing_time_months'],
        program_details=entry.get('program_details', {}),
        is_active=True,
    )
    for sort_order, (option_type, name, amount, holding, description) in enumerate(
        entry.get('investment_options', []), start=1
    ):
        program.investment_options.append(InvestmentOption(
            option_type=option_type,
            option_name=name,
            base_amount=amount,
            holding_period_months=holding,
            description=description,
            sort_order=sort_order,
            is_active=True,
        ))
    return program


def seed_programs(db: Session, catalog: List[Dict[str, Any]] = PROGRAM_CATALOG) -> int:
    """
    Insert catalog programs that are not already stored.

    Returns: number of programs inserted.
    """
    repo = ProgramRepository(db)
    inserted = 0

    for entry in catalog:
        existing = repo.get_program_by_name(entry['country_code'], entry['program_name'])
        if existing:
            logger.info(f"Skipping existing program: {entry['program_name']}")
            continue

        repo.add_program(build_program(entry))
        inserted += 1
        logger.info(f"Seeded program: {entry['program_name']}")

    return inserted


if __name__ == "__main__":
    with db_session_scope() as session:
        count = seed_programs(session)
    logger.info(f"Seeding complete: {count} program(s) added")
