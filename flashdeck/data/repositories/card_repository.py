"""
Card repository for data access operations.

Duplicate detection is left to the ``uniq_deck_content_hash`` constraint: the
repository flushes the write and translates the resulting IntegrityError,
which stays correct when two sessions race on the same (deck, fingerprint).
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, select, type_coerce
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from flashdeck.application.ports import CardRepositoryPort
from flashdeck.data.models.card_model import CONTENT_UNIQUE_CONSTRAINT, CardModel
from flashdeck.domain_core.entities.card import Card
from flashdeck.domain_core.exceptions import ConflictError, IntegrityViolationError
from flashdeck.infra.config.logging_config import get_logger

# SQLite reports the column list instead of the constraint name
_CONFLICT_MARKERS = (CONTENT_UNIQUE_CONSTRAINT, "cards.deck_id, cards.content_hash")


def is_content_conflict(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return any(marker in message for marker in _CONFLICT_MARKERS)


def tag_containment(tag: str):
    """JSONB `@>` predicate on the tag list, served by the GIN index."""
    return type_coerce(CardModel.tags, JSONB).contains([tag])


class CardRepository(CardRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.card")

    async def create(self, card: Card) -> Card:
        """Create a new card; raises ConflictError on duplicate content."""
        card_model = CardModel(
            id=card.id,
            deck_id=card.deck_id,
            user_id=card.user_id,
            front=card.front,
            back=card.back,
            tags=list(card.tags),
            content_hash=card.content_hash,
            ai_generated=card.ai_generated,
            created_at=card.created_at,
            updated_at=card.updated_at,
            deleted_at=card.deleted_at,
        )

        self.session.add(card_model)
        await self._flush(card.deck_id, card.content_hash)

        self._log.info(
            "card.create",
            card_id=card.id,
            deck_id=card.deck_id,
            ai_generated=card.ai_generated,
        )
        return self._to_entity(card_model)

    async def get_owned(self, card_id: UUID, owner_id: UUID) -> Optional[Card]:
        card_model = await self._get_owned_model(card_id, owner_id)
        if not card_model:
            self._log.info("card.get.not_found", card_id=card_id)
            return None
        return self._to_entity(card_model)

    async def list_by_deck(
        self,
        deck_id: UUID,
        owner_id: UUID,
        tag: Optional[str] = None,
        include_deleted: bool = False,
    ) -> List[Card]:
        """Cards in one deck, oldest first."""
        query = select(CardModel).where(
            CardModel.deck_id == deck_id, CardModel.user_id == owner_id
        )
        items = await self._list(query, tag, include_deleted)
        self._log.info("card.list.deck", deck_id=deck_id, count=len(items))
        return items

    async def list_by_owner(
        self, owner_id: UUID, tag: Optional[str] = None, include_deleted: bool = False
    ) -> List[Card]:
        query = select(CardModel).where(CardModel.user_id == owner_id)
        items = await self._list(query, tag, include_deleted)
        self._log.info("card.list.owner", user_id=owner_id, count=len(items))
        return items

    async def update(
        self, card_id: UUID, owner_id: UUID, values: Dict[str, Any]
    ) -> Optional[Card]:
        """Apply ``values`` through the ORM so the guard and constraint both run."""
        card_model = await self._get_owned_model(card_id, owner_id)
        if not card_model:
            return None

        for key, value in values.items():
            setattr(card_model, key, value)
        flag_modified(card_model, "updated_at")
        await self._flush(card_model.deck_id, card_model.content_hash)

        self._log.info("card.update", card_id=card_id, fields=sorted(values))
        return self._to_entity(card_model)

    async def delete(self, card_id: UUID, owner_id: UUID) -> bool:
        result = await self.session.execute(
            delete(CardModel).where(
                CardModel.id == card_id, CardModel.user_id == owner_id
            )
        )
        deleted = result.rowcount > 0
        self._log.info("card.delete", card_id=card_id, deleted=deleted)
        return deleted

    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        result = await self.session.execute(
            delete(CardModel).where(CardModel.user_id == owner_id)
        )
        self._log.info("card.delete_all", user_id=owner_id, count=result.rowcount)
        return result.rowcount

    async def _flush(self, deck_id: UUID, content_hash: str) -> None:
        try:
            await self.session.flush()
        except IntegrityError as exc:
            if is_content_conflict(exc):
                self._log.info(
                    "card.conflict", deck_id=deck_id, content_hash=content_hash
                )
                raise ConflictError(deck_id, content_hash) from exc
            self._log.error("card.integrity_error", deck_id=deck_id, error=str(exc.orig))
            raise IntegrityViolationError(str(exc.orig)) from exc

    async def _list(
        self, query, tag: Optional[str], include_deleted: bool
    ) -> List[Card]:
        if not include_deleted:
            query = query.where(CardModel.deleted_at.is_(None))
        in_database = tag is not None and self._dialect() == "postgresql"
        if in_database:
            query = query.where(tag_containment(tag))
        result = await self.session.execute(
            query.order_by(CardModel.created_at, CardModel.id)
        )
        items = [self._to_entity(model) for model in result.scalars().all()]
        # Plain JSON columns (SQLite) have no containment operator
        if tag is not None and not in_database:
            items = [card for card in items if card.has_tag(tag)]
        return items

    def _dialect(self) -> str:
        return self.session.get_bind().dialect.name

    async def _get_owned_model(
        self, card_id: UUID, owner_id: UUID
    ) -> Optional[CardModel]:
        result = await self.session.execute(
            select(CardModel).where(
                CardModel.id == card_id, CardModel.user_id == owner_id
            )
        )
        return result.scalar_one_or_none()

    def _to_entity(self, model: CardModel) -> Card:
        """Convert SQLAlchemy model to domain entity."""
        return Card(
            id=model.id,
            deck_id=model.deck_id,
            user_id=model.user_id,
            front=model.front,
            back=model.back,
            tags=list(model.tags or []),
            content_hash=model.content_hash,
            ai_generated=model.ai_generated,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
