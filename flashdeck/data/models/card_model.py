"""
SQLAlchemy model for Card entity.
"""

import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from flashdeck.data.models.base import Base, JSONDocument
from flashdeck.domain_core.clock import utcnow

CONTENT_UNIQUE_CONSTRAINT = "uniq_deck_content_hash"
TAGS_INDEX = "idx_cards_tags_gin"


class CardModel(Base):
    __tablename__ = "cards"
    __table_args__ = (
        UniqueConstraint("deck_id", "content_hash", name=CONTENT_UNIQUE_CONSTRAINT),
        Index(TAGS_INDEX, "tags", postgresql_using="gin").ddl_if(dialect="postgresql"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    deck_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("decks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Denormalized from decks.user_id; checked by the consistency guard on every write
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    front = Column(Text, nullable=False)
    back = Column(Text, nullable=False)
    tags = Column(JSONDocument, nullable=False, default=list)
    content_hash = Column(String(64), nullable=False)
    ai_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    deck = relationship("DeckModel", back_populates="cards")
