from .card_repository import CardRepository
from .deck_repository import DeckRepository
from .event_repository import EventRepository
from .owner_repository import OwnerRepository

__all__ = ["CardRepository", "DeckRepository", "EventRepository", "OwnerRepository"]
