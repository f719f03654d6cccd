from .base import Base
from .owner_model import OwnerModel
from .deck_model import DeckModel
from .card_model import CardModel
from .event_model import EventModel

__all__ = ["Base", "OwnerModel", "DeckModel", "CardModel", "EventModel"]
