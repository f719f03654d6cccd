"""
Deck management router.

- POST /decks: Create a deck
- GET /decks: List the caller's decks
- GET /decks/{deck_id}: Get one deck
- PATCH /decks/{deck_id}: Rename or redescribe a deck
- POST /decks/{deck_id}/archive: Set the soft-delete marker
- DELETE /decks/{deck_id}: Hard-delete a deck and its cards
"""

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from flashdeck.api.schemas.deck_io import (
    CreateDeckRequest,
    DeckListResponse,
    DeckResponse,
    UpdateDeckRequest,
)
from flashdeck.infra.config.dependencies import CurrentUserId, DeckStoreDep

router = APIRouter(prefix="/decks", tags=["decks"])


@router.post("", response_model=DeckResponse, status_code=status.HTTP_201_CREATED)
async def create_deck(
    request: CreateDeckRequest,
    current_user: CurrentUserId,
    store: DeckStoreDep,
) -> DeckResponse:
    deck = await store.create(current_user, request.name, request.description)
    return DeckResponse.model_validate(deck)


@router.get("", response_model=DeckListResponse)
async def list_decks(
    current_user: CurrentUserId,
    store: DeckStoreDep,
    include_deleted: bool = Query(False, description="Include archived decks"),
) -> DeckListResponse:
    decks = await store.list(current_user, include_deleted=include_deleted)
    return DeckListResponse(
        items=[DeckResponse.model_validate(d) for d in decks], total=len(decks)
    )


@router.get("/{deck_id}", response_model=DeckResponse)
async def get_deck(
    deck_id: UUID, current_user: CurrentUserId, store: DeckStoreDep
) -> DeckResponse:
    return DeckResponse.model_validate(await store.get(deck_id, current_user))


@router.patch("/{deck_id}", response_model=DeckResponse)
async def update_deck(
    deck_id: UUID,
    request: UpdateDeckRequest,
    current_user: CurrentUserId,
    store: DeckStoreDep,
) -> DeckResponse:
    deck = await store.update(
        deck_id, current_user, request.model_dump(exclude_unset=True)
    )
    return DeckResponse.model_validate(deck)


@router.post("/{deck_id}/archive", response_model=DeckResponse)
async def archive_deck(
    deck_id: UUID, current_user: CurrentUserId, store: DeckStoreDep
) -> DeckResponse:
    return DeckResponse.model_validate(await store.archive(deck_id, current_user))


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_deck(
    deck_id: UUID, current_user: CurrentUserId, store: DeckStoreDep
) -> Response:
    await store.delete(deck_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
