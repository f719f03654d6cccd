"""
Domain errors raised by the storage core.

Each error carries a stable ``code`` that the API layer maps to an HTTP
status. ``NotFoundError`` covers both "absent" and "owned by someone else".
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Entity is absent or not owned by the caller."""

    def __init__(self, entity: str, entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} not found", "NOT_FOUND")


class ConflictError(DomainError):
    """Card content already exists in the target deck."""

    def __init__(self, deck_id=None, content_hash: str | None = None):
        self.deck_id = deck_id
        self.content_hash = content_hash
        super().__init__("A card with the same content already exists in this deck", "CONFLICT")


class ForbiddenError(DomainError):
    def __init__(self, message: str = "Users can only delete their own data"):
        super().__init__(message, "FORBIDDEN")


class IntegrityViolationError(DomainError):
    """An internal invariant was broken; indicates a defect, not user error."""

    def __init__(self, message: str):
        super().__init__(message, "INTEGRITY_VIOLATION")


class DomainValidationError(DomainError, ValueError):
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")
