"""
Card domain entity.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from flashdeck.domain_core.value_objects.fingerprint import fingerprint


@dataclass
class Card:
    id: UUID
    deck_id: UUID
    user_id: UUID
    front: str
    back: str
    content_hash: str
    created_at: datetime
    updated_at: datetime
    tags: List[str] = field(default_factory=list)
    ai_generated: bool = False
    deleted_at: Optional[datetime] = None

    @property
    def is_archived(self) -> bool:
        return self.deleted_at is not None

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def matches_content(self, front: str, back: str) -> bool:
        """Business rule: same content means same fingerprint, not same text."""
        return self.content_hash == fingerprint(front, back)
