import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence
from sqlalchemy import select

from database.models import CrbiProgram, InvestmentOption
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ProgramRepository(BaseRepository):
    def list_active_programs(self) -> List[CrbiProgram]:
        stmt = (
            select(CrbiProgram)
            .where(CrbiProgram.is_active.is_(True))
            .order_by(CrbiProgram.min_investment.desc(), CrbiProgram.id)
        )
        return self.db.execute(stmt).scalars().all()

    def get_program_by_id(self, program_id: Any) -> Optional[CrbiProgram]:
        stmt = select(CrbiProgram).where(CrbiProgram.id == program_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_program_by_name(self, country_code: str, program_name: str) -> Optional[CrbiProgram]:
        stmt = select(CrbiProgram).where(
            CrbiProgram.country_code == country_code,
            CrbiProgram.program_name == program_name
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_active_investment_options(
        self,
        program_ids: Sequence[Any]
    ) -> Dict[Any, List[InvestmentOption]]:
        """Fetch active options for many programs in one query, grouped by program id."""
        if not program_ids:
            return {}

        stmt = (
            select(InvestmentOption)
            .where(
                InvestmentOption.program_id.in_(list(program_ids)),
                InvestmentOption.is_active.is_(True)
            )
            .order_by(InvestmentOption.program_id, InvestmentOption.sort_order)
        )
        rows = self.db.execute(stmt).scalars().all()

        grouped: Dict[Any, List[InvestmentOption]] = defaultdict(list)
        for option in rows:
            grouped[option.program_id].append(option)
        logger.debug(f"Fetched {len(rows)} active investment option(s) for {len(program_ids)} program(s)")
        return dict(grouped)

    def add_program(self, program: CrbiProgram) -> CrbiProgram:
        self.db.add(program)
        self.db.flush()
        return program
