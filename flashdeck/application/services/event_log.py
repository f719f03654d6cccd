"""
Event Log - append-only telemetry sink scoped by owner.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.domain_core.clock import utcnow
from flashdeck.domain_core.entities.event import Event
from flashdeck.domain_core.exceptions import NotFoundError
from flashdeck.domain_core.validators.event_validators import EventValidators
from flashdeck.infra.config.logging_config import get_logger


def _as_utc(moment: Optional[datetime]) -> Optional[datetime]:
    if moment is None or moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc)


class EventLog:
    """Events can be appended, listed and deleted. There is no update."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("service.event_log")

    async def append(
        self,
        owner_id: UUID,
        event_type: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Event:
        event_type = EventValidators.validate_event_type(event_type)
        payload = EventValidators.validate_payload(payload)

        event = Event(
            id=uuid4(),
            user_id=owner_id,
            event_type=event_type,
            payload=payload,
            created_at=utcnow(),
        )

        async with self.uow:
            await self.uow.owner_repo.ensure(owner_id)
            event = await self.uow.event_repo.append(event)
            await self.uow.commit()
        return event

    async def list_by_owner(
        self,
        owner_id: UUID,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        event_type: Optional[str] = None,
    ) -> List[Event]:
        async with self.uow:
            return await self.uow.event_repo.list_by_owner(
                owner_id,
                since=_as_utc(since),
                until=_as_utc(until),
                event_type=event_type,
            )

    async def delete(self, event_id: UUID, owner_id: UUID) -> None:
        async with self.uow:
            if not await self.uow.event_repo.delete(event_id, owner_id):
                raise NotFoundError("event", event_id)
            await self.uow.commit()

        self._log.info("event.deleted", event_id=event_id)
