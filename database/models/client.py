import uuid

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Boolean, Integer, Index
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import relationship

from .base import Base


class Client(Base):
    """
    A prospective CRBI investor handled by a firm.

    Stores intake answers used for program matching:
    - Identity and contact details
    - Immigration goals, preferred regions and timeline
    - Professional background
    - Financial readiness and compliance flags

    Enumerated columns are plain text; values are validated when a client
    is turned into a ClientProfile for scoring.
    """
    __tablename__ = 'clients'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    firm_id = Column(UUID(as_uuid=True), ForeignKey('firms.id', ondelete='CASCADE'), nullable=False)

    # Identity
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text)
    phone = Column(Text)
    nationality = Column(Text)
    current_citizenships = Column(ARRAY(Text), default=list)

    # Goals
    primary_goals = Column(ARRAY(Text), default=list)
    geographic_preferences = Column(ARRAY(Text), default=list)
    desired_timeline = Column(Text)  # immediate|6_months|1_year|2_years|exploring
    urgency_level = Column(Text)  # low|medium|high|urgent

    # Professional background
    employment_status = Column(Text)  # employed|self_employed|business_owner|retired|unemployed
    current_profession = Column(Text)
    industry = Column(Text)
    years_of_experience = Column(Integer)

    # Financial readiness
    budget_range = Column(Text)  # under_500k|500k_1m|1m_2m|2m_plus
    source_of_funds_readiness = Column(Text)  # ready|1_month|3_months|6_months|not_ready

    # Compliance
    sanctions_screening = Column(Text)  # cleared|pending|flagged
    criminal_background = Column(Boolean, default=False)
    visa_denials = Column(Boolean, default=False)
    is_pep = Column(Boolean, default=False)

    status = Column(Text, default='prospect')
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"), onupdate=sql_text("timezone('UTC', now())"))

    firm = relationship("Firm", back_populates="clients")

    __table_args__ = (
        Index('idx_clients_firm', 'firm_id'),
        Index('idx_clients_status', 'status'),
        Index('idx_clients_name', 'first_name', 'last_name'),
    )
