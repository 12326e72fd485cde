import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, Integer, Numeric, UniqueConstraint, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class CrbiProgram(Base):
    """
    Citizenship or residency by investment program (catalog master data).
    """
    __tablename__ = 'crbi_programs'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    country_code = Column(Text, nullable=False)
    country_name = Column(Text, nullable=False)
    program_type = Column(Text, nullable=False)  # citizenship|residency
    program_name = Column(Text, nullable=False)
    min_investment = Column(Numeric(15, 2), nullable=False)
    processing_time_months = Column(Integer)
    program_details = Column(JSONB, default={})
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    investment_options = relationship(
        "InvestmentOption",
        back_populates="program",
        cascade="all, delete-orphan",
        order_by="InvestmentOption.sort_order"
    )

    __table_args__ = (
        UniqueConstraint('country_code', 'program_name', name='uq_crbi_program_country_name'),
        Index('idx_programs_country', 'country_code'),
        Index('idx_programs_type', 'program_type'),
        Index('idx_programs_active', 'is_active'),
    )


class InvestmentOption(Base):
    """
    A qualifying investment route within a program (fund, real estate, donation...).
    """
    __tablename__ = 'investment_options'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    program_id = Column(UUID(as_uuid=True), ForeignKey('crbi_programs.id', ondelete='CASCADE'), nullable=False)

    option_type = Column(Text, nullable=False)
    option_name = Column(Text, nullable=False)
    description = Column(Text)
    base_amount = Column(Numeric(15, 2), nullable=False)
    holding_period_months = Column(Integer)
    sort_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    program = relationship("CrbiProgram", back_populates="investment_options")

    __table_args__ = (
        Index('idx_investment_options_program', 'program_id'),
        Index('idx_investment_options_sort', 'program_id', 'sort_order'),
    )
