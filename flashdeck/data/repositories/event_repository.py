"""
Event repository for the append-only telemetry log.

There is no update method; rows are written once and only ever
removed by their owner or by account erasure.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.application.ports import EventRepositoryPort
from flashdeck.data.models.event_model import EventModel
from flashdeck.domain_core.entities.event import Event
from flashdeck.infra.config.logging_config import get_logger


class EventRepository(EventRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.event")

    async def append(self, event: Event) -> Event:
        """Store an event."""
        event_model = EventModel(
            id=event.id,
            user_id=event.user_id,
            event_type=event.event_type,
            payload=dict(event.payload),
            created_at=event.created_at,
        )

        self.session.add(event_model)
        await self.session.flush()
        self._log.info(
            "event.append", event_id=event.id, event_type=event.event_type
        )
        return self._to_entity(event_model)

    async def list_by_owner(
        self,
        owner_id: UUID,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        event_type: Optional[str] = None,
    ) -> List[Event]:
        """Get an owner's events ordered by creation time (since <= t < until)."""
        query = select(EventModel).where(EventModel.user_id == owner_id)
        if since is not None:
            query = query.where(EventModel.created_at >= since)
        if until is not None:
            query = query.where(EventModel.created_at < until)
        if event_type is not None:
            query = query.where(EventModel.event_type == event_type)

        result = await self.session.execute(
            query.order_by(EventModel.created_at, EventModel.id)
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("event.list", user_id=owner_id, count=len(items))
        return items

    async def delete(self, event_id: UUID, owner_id: UUID) -> bool:
        result = await self.session.execute(
            delete(EventModel).where(
                EventModel.id == event_id, EventModel.user_id == owner_id
            )
        )
        deleted = result.rowcount > 0
        self._log.info("event.delete", event_id=event_id, deleted=deleted)
        return deleted

    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        result = await self.session.execute(
            delete(EventModel).where(EventModel.user_id == owner_id)
        )
        self._log.info("event.delete_all", user_id=owner_id, count=result.rowcount)
        return result.rowcount

    def _to_entity(self, model: EventModel) -> Event:
        return Event(
            id=model.id,
            user_id=model.user_id,
            event_type=model.event_type,
            payload=dict(model.payload or {}),
            created_at=model.created_at,
        )
