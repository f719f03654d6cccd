"""
Event log router. Events are append-only: there is no PATCH or PUT route.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from flashdeck.api.schemas.event_io import (
    AppendEventRequest,
    EventListResponse,
    EventResponse,
)
from flashdeck.infra.config.dependencies import CurrentUserId, EventLogDep

router = APIRouter(prefix="/events", tags=["events"])


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def append_event(
    request: AppendEventRequest,
    current_user: CurrentUserId,
    event_log: EventLogDep,
) -> EventResponse:
    event = await event_log.append(current_user, request.event_type, request.payload)
    return EventResponse.model_validate(event)


@router.get("", response_model=EventListResponse)
async def list_events(
    current_user: CurrentUserId,
    event_log: EventLogDep,
    since: Optional[datetime] = Query(None, description="Inclusive lower bound"),
    until: Optional[datetime] = Query(None, description="Exclusive upper bound"),
    event_type: Optional[str] = Query(None),
) -> EventListResponse:
    events = await event_log.list_by_owner(
        current_user, since=since, until=until, event_type=event_type
    )
    return EventListResponse(
        items=[EventResponse.model_validate(e) for e in events], total=len(events)
    )


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: UUID, current_user: CurrentUserId, event_log: EventLogDep
) -> Response:
    await event_log.delete(event_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
