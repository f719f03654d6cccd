"""
Deck input/output schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ---------- DECK REQUEST SCHEMAS ----------
class CreateDeckRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)


class UpdateDeckRequest(BaseModel):
    """Partial update; only fields present in the body are applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)


# ---------- DECK RESPONSE SCHEMAS ----------
class DeckResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None


class DeckListResponse(BaseModel):
    items: List[DeckResponse]
    total: int = Field(..., ge=0)
