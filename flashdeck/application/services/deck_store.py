"""
Deck Store - owner-scoped deck lifecycle.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.domain_core.clock import utcnow
from flashdeck.domain_core.entities.deck import Deck
from flashdeck.domain_core.exceptions import NotFoundError
from flashdeck.domain_core.validators.deck_validators import DeckValidators
from flashdeck.infra.config.logging_config import bind_context, get_logger


class DeckStore:
    """
    Application service for decks.

    Decks that do not exist and decks owned by someone else both surface as
    ``NotFoundError``.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("service.deck_store")

    async def create(
        self, owner_id: UUID, name: str, description: Optional[str] = None
    ) -> Deck:
        name = DeckValidators.validate_name(name)
        bind_context(owner_id=owner_id)

        now = utcnow()
        deck = Deck(
            id=uuid4(),
            user_id=owner_id,
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )

        async with self.uow:
            await self.uow.owner_repo.ensure(owner_id)
            deck = await self.uow.deck_repo.create(deck)
            await self.uow.commit()

        self._log.info("deck.created", deck_id=deck.id)
        return deck

    async def get(self, deck_id: UUID, owner_id: UUID) -> Deck:
        async with self.uow:
            deck = await self.uow.deck_repo.get_owned(deck_id, owner_id)
        if deck is None:
            raise NotFoundError("deck", deck_id)
        return deck

    async def list(self, owner_id: UUID, include_deleted: bool = False) -> List[Deck]:
        async with self.uow:
            return await self.uow.deck_repo.list_by_owner(
                owner_id, include_deleted=include_deleted
            )

    async def update(
        self, deck_id: UUID, owner_id: UUID, fields: Dict[str, Any]
    ) -> Deck:
        values = DeckValidators.validate_update_fields(fields)
        bind_context(owner_id=owner_id, deck_id=deck_id)

        async with self.uow:
            deck = await self.uow.deck_repo.update(deck_id, owner_id, values)
            if deck is None:
                raise NotFoundError("deck", deck_id)
            await self.uow.commit()

        self._log.info("deck.updated", fields=sorted(values))
        return deck

    async def archive(self, deck_id: UUID, owner_id: UUID) -> Deck:
        """Set the soft-delete marker. The deck and its cards stay stored."""
        async with self.uow:
            deck = await self.uow.deck_repo.update(
                deck_id, owner_id, {"deleted_at": utcnow()}
            )
            if deck is None:
                raise NotFoundError("deck", deck_id)
            await self.uow.commit()

        self._log.info("deck.archived", deck_id=deck_id)
        return deck

    async def delete(self, deck_id: UUID, owner_id: UUID) -> None:
        """Hard-delete a deck; its cards are removed by the FK cascade."""
        bind_context(owner_id=owner_id, deck_id=deck_id)

        async with self.uow:
            if not await self.uow.deck_repo.delete(deck_id, owner_id):
                raise NotFoundError("deck", deck_id)
            await self.uow.commit()

        self._log.info("deck.deleted")
