from .account_io import DeletionReportResponse
from .base import ErrorResponse
from .card_io import CardListResponse, CardResponse, CreateCardRequest, UpdateCardRequest
from .deck_io import CreateDeckRequest, DeckListResponse, DeckResponse, UpdateDeckRequest
from .event_io import AppendEventRequest, EventListResponse, EventResponse

__all__ = [
    "AppendEventRequest",
    "CardListResponse",
    "CardResponse",
    "CreateCardRequest",
    "CreateDeckRequest",
    "DeckListResponse",
    "DeckResponse",
    "DeletionReportResponse",
    "ErrorResponse",
    "EventListResponse",
    "EventResponse",
    "UpdateCardRequest",
    "UpdateDeckRequest",
]
