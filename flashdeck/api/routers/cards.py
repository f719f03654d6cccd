"""
Card router.

Creating a card whose normalized content already exists in the deck
returns 409.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from flashdeck.api.schemas.card_io import (
    CardListResponse,
    CardResponse,
    CreateCardRequest,
    UpdateCardRequest,
)
from flashdeck.infra.config.dependencies import CardStoreDep, CurrentUserId

router = APIRouter(tags=["cards"])


def _list_response(cards) -> CardListResponse:
    return CardListResponse(
        items=[CardResponse.model_validate(c) for c in cards], total=len(cards)
    )


@router.post(
    "/decks/{deck_id}/cards",
    response_model=CardResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_card(
    deck_id: UUID,
    request: CreateCardRequest,
    current_user: CurrentUserId,
    store: CardStoreDep,
) -> CardResponse:
    card = await store.create(
        deck_id,
        current_user,
        front=request.front,
        back=request.back,
        tags=request.tags,
        ai_generated=request.ai_generated,
    )
    return CardResponse.model_validate(card)


@router.get("/decks/{deck_id}/cards", response_model=CardListResponse)
async def list_deck_cards(
    deck_id: UUID,
    current_user: CurrentUserId,
    store: CardStoreDep,
    tag: Optional[str] = Query(None, description="Only cards carrying this tag"),
) -> CardListResponse:
    return _list_response(await store.list_by_deck(deck_id, current_user, tag=tag))


@router.get("/cards", response_model=CardListResponse)
async def list_cards(
    current_user: CurrentUserId,
    store: CardStoreDep,
    tag: Optional[str] = Query(None, description="Only cards carrying this tag"),
) -> CardListResponse:
    return _list_response(await store.list_by_owner(current_user, tag=tag))


@router.get("/cards/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: UUID, current_user: CurrentUserId, store: CardStoreDep
) -> CardResponse:
    return CardResponse.model_validate(await store.get(card_id, current_user))


@router.patch("/cards/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: UUID,
    request: UpdateCardRequest,
    current_user: CurrentUserId,
    store: CardStoreDep,
) -> CardResponse:
    card = await store.update(
        card_id, current_user, request.model_dump(exclude_unset=True)
    )
    return CardResponse.model_validate(card)


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(
    card_id: UUID, current_user: CurrentUserId, store: CardStoreDep
) -> Response:
    await store.delete(card_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
