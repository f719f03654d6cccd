"""
Event input/output schemas. Events have no update schema.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AppendEventRequest(BaseModel):
    event_type: str = Field(..., min_length=1, max_length=200)
    payload: Dict[str, Any] = Field(default_factory=dict)


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    event_type: str
    payload: Dict[str, Any]
    created_at: datetime


class EventListResponse(BaseModel):
    items: List[EventResponse]
    total: int = Field(..., ge=0)
