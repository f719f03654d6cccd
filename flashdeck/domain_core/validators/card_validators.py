"""
Domain validators for card-related business rules.
"""

from typing import Any, Dict, Iterable, List, Optional

from flashdeck.domain_core.exceptions import DomainValidationError


class CardValidators:
    UPDATABLE_FIELDS = frozenset({"front", "back", "tags", "ai_generated", "deck_id"})

    @staticmethod
    def validate_side(text: Optional[str], side: str) -> str:
        """Front and back are required and must contain something besides whitespace."""
        if text is None or not text.strip():
            raise DomainValidationError(f"Card {side} cannot be empty")
        return text

    @staticmethod
    def validate_tags(tags: Optional[Iterable[str]]) -> List[str]:
        """Tags are opaque strings; duplicates and order are kept as given."""
        if tags is None:
            return []
        if isinstance(tags, str):
            raise DomainValidationError("Card tags must be a list of strings")

        result = list(tags)
        for tag in result:
            if not isinstance(tag, str):
                raise DomainValidationError("Card tags must be a list of strings")
        return result

    @staticmethod
    def validate_update_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a partial card update and return the cleaned fields."""
        unknown = set(fields) - CardValidators.UPDATABLE_FIELDS
        if unknown:
            raise DomainValidationError(f"Invalid card fields: {sorted(unknown)}")

        cleaned = dict(fields)
        for side in ("front", "back"):
            if side in cleaned:
                CardValidators.validate_side(cleaned[side], side)
        if "tags" in cleaned:
            cleaned["tags"] = CardValidators.validate_tags(cleaned["tags"])
        if "ai_generated" in cleaned and not isinstance(cleaned["ai_generated"], bool):
            raise DomainValidationError("Card ai_generated must be a boolean")
        if "deck_id" in cleaned and cleaned["deck_id"] is None:
            raise DomainValidationError("Card deck_id cannot be null")
        return cleaned
