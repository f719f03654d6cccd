"""
SQLAlchemy model for telemetry events (append-only).
"""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Index, Text, Uuid

from flashdeck.data.models.base import Base, JSONDocument
from flashdeck.domain_core.clock import utcnow


class EventModel(Base):
    __tablename__ = "events"
    __table_args__ = (
        Index("idx_events_user_id_created_at", "user_id", "created_at"),
        Index("idx_events_event_type", "event_type"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
    )
    event_type = Column(Text, nullable=False)  # card_viewed, generated_view, ...
    payload = Column(JSONDocument, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
