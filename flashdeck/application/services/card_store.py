"""
Card Store - deduplicated card lifecycle.

Each card is keyed within its deck by the fingerprint of its normalized
content. Uniqueness is never pre-checked here; the storage constraint
decides, so concurrent creators cannot both win.
"""

from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID, uuid4

from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.domain_core.clock import utcnow
from flashdeck.domain_core.entities.card import Card
from flashdeck.domain_core.exceptions import NotFoundError
from flashdeck.domain_core.validators.card_validators import CardValidators
from flashdeck.domain_core.value_objects.fingerprint import fingerprint
from flashdeck.infra.config.logging_config import bind_context, get_logger


class CardStore:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("service.card_store")

    async def create(
        self,
        deck_id: UUID,
        owner_id: UUID,
        front: str,
        back: str,
        tags: Optional[Iterable[str]] = None,
        ai_generated: bool = False,
    ) -> Card:
        """
        Create a card in an owned deck.

        Raises:
            DomainValidationError: front or back is empty.
            NotFoundError: the deck is missing or owned by someone else.
            ConflictError: the deck already holds a card with the same fingerprint.
        """
        CardValidators.validate_side(front, "front")
        CardValidators.validate_side(back, "back")
        tags = CardValidators.validate_tags(tags)
        bind_context(owner_id=owner_id, deck_id=deck_id)

        async with self.uow:
            deck = await self.uow.deck_repo.get_owned(deck_id, owner_id)
            if deck is None:
                raise NotFoundError("deck", deck_id)

            now = utcnow()
            card = Card(
                id=uuid4(),
                deck_id=deck.id,
                # Copied from the deck at this instant; the guard re-checks it
                user_id=deck.user_id,
                front=front,
                back=back,
                tags=tags,
                content_hash=fingerprint(front, back),
                ai_generated=bool(ai_generated),
                created_at=now,
                updated_at=now,
            )
            card = await self.uow.card_repo.create(card)
            await self.uow.commit()

        self._log.info("card.created", card_id=card.id)
        return card

    async def get(self, card_id: UUID, owner_id: UUID) -> Card:
        async with self.uow:
            card = await self.uow.card_repo.get_owned(card_id, owner_id)
        if card is None:
            raise NotFoundError("card", card_id)
        return card

    async def list_by_deck(
        self, deck_id: UUID, owner_id: UUID, tag: Optional[str] = None
    ) -> List[Card]:
        async with self.uow:
            if await self.uow.deck_repo.get_owned(deck_id, owner_id) is None:
                raise NotFoundError("deck", deck_id)
            return await self.uow.card_repo.list_by_deck(deck_id, owner_id, tag=tag)

    async def list_by_owner(
        self, owner_id: UUID, tag: Optional[str] = None
    ) -> List[Card]:
        async with self.uow:
            return await self.uow.card_repo.list_by_owner(owner_id, tag=tag)

    async def update(
        self, card_id: UUID, owner_id: UUID, fields: Dict[str, Any]
    ) -> Card:
        """
        Update an owned card.

        Changing front or back recomputes the fingerprint; the new value is
        checked against the other cards of the (possibly new) deck.
        """
        values = CardValidators.validate_update_fields(fields)
        bind_context(owner_id=owner_id, card_id=card_id)

        async with self.uow:
            current = await self.uow.card_repo.get_owned(card_id, owner_id)
            if current is None:
                raise NotFoundError("card", card_id)

            if "deck_id" in values and values["deck_id"] != current.deck_id:
                target = await self.uow.deck_repo.get_owned(values["deck_id"], owner_id)
                if target is None:
                    raise NotFoundError("deck", values["deck_id"])

            if "front" in values or "back" in values:
                front = values.get("front", current.front)
                back = values.get("back", current.back)
                if not current.matches_content(front, back):
                    values["content_hash"] = fingerprint(front, back)

            card = await self.uow.card_repo.update(card_id, owner_id, values)
            if card is None:
                raise NotFoundError("card", card_id)
            await self.uow.commit()

        self._log.info("card.updated", fields=sorted(fields))
        return card

    async def archive(self, card_id: UUID, owner_id: UUID) -> Card:
        async with self.uow:
            card = await self.uow.card_repo.update(
                card_id, owner_id, {"deleted_at": utcnow()}
            )
            if card is None:
                raise NotFoundError("card", card_id)
            await self.uow.commit()

        self._log.info("card.archived", card_id=card_id)
        return card

    async def delete(self, card_id: UUID, owner_id: UUID) -> None:
        async with self.uow:
            if not await self.uow.card_repo.delete(card_id, owner_id):
                raise NotFoundError("card", card_id)
            await self.uow.commit()

        self._log.info("card.deleted", card_id=card_id)
