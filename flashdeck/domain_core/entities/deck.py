"""
Deck domain entity with core business rules.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID
from datetime import datetime


@dataclass
class Deck:
    id: UUID
    user_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_archived(self) -> bool:
        """Soft-delete marker is set (UX only, the row still exists)."""
        return self.deleted_at is not None
