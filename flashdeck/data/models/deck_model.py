"""
SQLAlchemy model for Deck entity.
"""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship

from flashdeck.data.models.base import Base
from flashdeck.domain_core.clock import utcnow


class DeckModel(Base):
    __tablename__ = "decks"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    # UX-only soft delete; GDPR erasure is always a hard delete
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    # Cards go with the deck through the FK cascade, not through the ORM
    cards = relationship("CardModel", back_populates="deck", passive_deletes=True)
