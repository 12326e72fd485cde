import uuid

from sqlalchemy import Column, Text, TIMESTAMP
from sqlalchemy.sql import text as sql_text
from sqlalchemy.dialects.postgresql import UUID, JSONB
from sqlalchemy.orm import relationship

from .base import Base


class Firm(Base):
    """Advisory firm; the tenant boundary for clients."""
    __tablename__ = 'firms'

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    slug = Column(Text, nullable=False, unique=True)
    subscription_tier = Column(Text, default='starter')
    settings = Column(JSONB, default={})
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=sql_text("timezone('UTC', now())"))

    clients = relationship("Client", back_populates="firm", cascade="all, delete-orphan")
