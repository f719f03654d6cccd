"""
Card input/output schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ---------- CARD REQUEST SCHEMAS ----------
class CreateCardRequest(BaseModel):
    front: str = Field(..., min_length=1)
    back: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    ai_generated: bool = False


class UpdateCardRequest(BaseModel):
    """Partial update; moving a card means sending a new ``deck_id``."""

    front: Optional[str] = Field(None, min_length=1)
    back: Optional[str] = Field(None, min_length=1)
    tags: Optional[List[str]] = None
    ai_generated: Optional[bool] = None
    deck_id: Optional[UUID] = None


# ---------- CARD RESPONSE SCHEMAS ----------
class CardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    deck_id: UUID
    user_id: UUID
    front: str
    back: str
    tags: List[str]
    content_hash: str
    ai_generated: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class CardListResponse(BaseModel):
    items: List[CardResponse]
    total: int = Field(..., ge=0)
