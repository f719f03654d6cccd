from .card_store import CardStore
from .deck_store import DeckStore
from .event_log import EventLog

__all__ = ["CardStore", "DeckStore", "EventLog"]
