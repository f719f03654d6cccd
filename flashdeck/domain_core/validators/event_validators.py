"""
Domain validators for telemetry events.
"""

from typing import Any, Dict, Optional

from flashdeck.domain_core.exceptions import DomainValidationError


class EventValidators:
    @staticmethod
    def validate_event_type(event_type: Optional[str]) -> str:
        if event_type is None or not event_type.strip():
            raise DomainValidationError("Event type cannot be empty")
        return event_type

    @staticmethod
    def validate_payload(payload: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Payload schema is not enforced, but it must be a key-value object."""
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise DomainValidationError("Event payload must be an object")
        return payload
