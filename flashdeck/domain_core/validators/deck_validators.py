"""
Domain validators for deck-related business rules.
"""

from typing import Any, Dict, Optional

from flashdeck.domain_core.exceptions import DomainValidationError


class DeckValidators:
    UPDATABLE_FIELDS = frozenset({"name", "description"})

    @staticmethod
    def validate_name(name: Optional[str]) -> str:
        """Validate deck name and return it stripped."""
        if name is None or not name.strip():
            raise DomainValidationError("Deck name cannot be empty")
        return name.strip()

    @staticmethod
    def validate_update_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
        """Validate a partial deck update and return the cleaned fields."""
        unknown = set(fields) - DeckValidators.UPDATABLE_FIELDS
        if unknown:
            raise DomainValidationError(
                f"Invalid deck fields: {sorted(unknown)}"
            )

        cleaned = dict(fields)
        if "name" in cleaned:
            cleaned["name"] = DeckValidators.validate_name(cleaned["name"])
        return cleaned
