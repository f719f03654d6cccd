from .card import Card
from .deck import Deck
from .event import Event

__all__ = ["Card", "Deck", "Event"]
