"""
SQLAlchemy model for the local mirror of identity-provider users.

Decks, cards and events reference this table with ON DELETE CASCADE, so
removing an owner row purges everything that owner created.
"""

from sqlalchemy import Column, DateTime, Uuid

from flashdeck.data.models.base import Base
from flashdeck.domain_core.clock import utcnow


class OwnerModel(Base):
    __tablename__ = "owners"

    id = Column(Uuid(as_uuid=True), primary_key=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
