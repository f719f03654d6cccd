"""
Application ports - abstract interfaces for the storage collaborators.

These interfaces define the contracts that the application layer needs
from the persistence layer, following the Dependency Inversion Principle.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from flashdeck.domain_core.entities import Card, Deck, Event


class OwnerRepositoryPort(ABC):
    @abstractmethod
    async def ensure(self, owner_id: UUID) -> None:
        """Make sure the owner row exists."""

    @abstractmethod
    async def remove(self, owner_id: UUID) -> bool:
        """Remove the owner row (cascades to all owned data)."""


class DeckRepositoryPort(ABC):
    """Abstract repository interface for Deck operations."""

    @abstractmethod
    async def create(self, deck: Deck) -> Deck:
        """Create a new deck."""

    @abstractmethod
    async def get_owned(self, deck_id: UUID, owner_id: UUID) -> Optional[Deck]:
        """Get a deck owned by ``owner_id``."""

    @abstractmethod
    async def list_by_owner(
        self, owner_id: UUID, include_deleted: bool = False
    ) -> List[Deck]:
        """List an owner's decks."""

    @abstractmethod
    async def update(
        self, deck_id: UUID, owner_id: UUID, values: Dict[str, Any]
    ) -> Optional[Deck]:
        """Update an owned deck."""

    @abstractmethod
    async def delete(self, deck_id: UUID, owner_id: UUID) -> bool:
        """Delete an owned deck."""

    @abstractmethod
    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        """Delete every deck of an owner."""


class CardRepositoryPort(ABC):
    """Abstract repository interface for Card operations."""

    @abstractmethod
    async def create(self, card: Card) -> Card:
        """Create a new card."""

    @abstractmethod
    async def get_owned(self, card_id: UUID, owner_id: UUID) -> Optional[Card]:
        """Get a card owned by ``owner_id``."""

    @abstractmethod
    async def list_by_deck(
        self,
        deck_id: UUID,
        owner_id: UUID,
        tag: Optional[str] = None,
        include_deleted: bool = False,
    ) -> List[Card]:
        """List the cards of one deck."""

    @abstractmethod
    async def list_by_owner(
        self, owner_id: UUID, tag: Optional[str] = None, include_deleted: bool = False
    ) -> List[Card]:
        """List all cards of an owner."""

    @abstractmethod
    async def update(
        self, card_id: UUID, owner_id: UUID, values: Dict[str, Any]
    ) -> Optional[Card]:
        """Update an owned card."""

    @abstractmethod
    async def delete(self, card_id: UUID, owner_id: UUID) -> bool:
        """Delete an owned card."""

    @abstractmethod
    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        """Delete every card of an owner."""


class EventRepositoryPort(ABC):
    """Append-only event storage. No update operation is part of the contract."""

    @abstractmethod
    async def append(self, event: Event) -> Event:
        """Store an event."""

    @abstractmethod
    async def list_by_owner(
        self,
        owner_id: UUID,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        event_type: Optional[str] = None,
    ) -> List[Event]:
        """List an owner's events in creation order."""

    @abstractmethod
    async def delete(self, event_id: UUID, owner_id: UUID) -> bool:
        """Delete an owned event."""

    @abstractmethod
    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        """Delete every event of an owner."""
