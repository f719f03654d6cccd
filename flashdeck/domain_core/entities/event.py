"""
Telemetry event entity. Events are written once and never modified.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
from uuid import UUID
from datetime import datetime


@dataclass(frozen=True)
class Event:
    id: UUID
    user_id: UUID
    event_type: str
    created_at: datetime
    payload: Dict[str, Any] = field(default_factory=dict)
