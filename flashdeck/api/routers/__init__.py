from fastapi import APIRouter

from . import account, cards, decks, events

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(decks.router)
v1_router.include_router(cards.router)
v1_router.include_router(events.router)
v1_router.include_router(account.router)

__all__ = ["v1_router"]
