"""
Account data erasure schemas.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DeletionReportResponse(BaseModel):
    """Rows removed per table by a data erasure request."""

    model_config = ConfigDict(from_attributes=True)

    owner_id: UUID
    events: int = Field(..., ge=0)
    cards: int = Field(..., ge=0)
    decks: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
