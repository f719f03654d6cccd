"""
Deck repository for data access operations.

Every lookup is scoped by owner: a deck that exists but belongs to someone
else is indistinguishable from a missing one.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import flag_modified

from flashdeck.application.ports import DeckRepositoryPort
from flashdeck.data.models.deck_model import DeckModel
from flashdeck.domain_core.entities.deck import Deck
from flashdeck.infra.config.logging_config import get_logger


class DeckRepository(DeckRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.deck")

    async def create(self, deck: Deck) -> Deck:
        """Create a new deck."""
        deck_model = DeckModel(
            id=deck.id,
            user_id=deck.user_id,
            name=deck.name,
            description=deck.description,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
            deleted_at=deck.deleted_at,
        )

        self.session.add(deck_model)
        await self.session.flush()

        self._log.info("deck.create", deck_id=deck.id, user_id=deck.user_id)
        return self._to_entity(deck_model)

    async def get_owned(self, deck_id: UUID, owner_id: UUID) -> Optional[Deck]:
        """Get a deck if it exists and belongs to ``owner_id``."""
        deck_model = await self._get_owned_model(deck_id, owner_id)
        if not deck_model:
            self._log.info("deck.get.not_found", deck_id=deck_id)
            return None
        return self._to_entity(deck_model)

    async def list_by_owner(
        self, owner_id: UUID, include_deleted: bool = False
    ) -> List[Deck]:
        """Get all decks for an owner, newest first."""
        query = select(DeckModel).where(DeckModel.user_id == owner_id)
        if not include_deleted:
            query = query.where(DeckModel.deleted_at.is_(None))
        result = await self.session.execute(
            query.order_by(DeckModel.created_at.desc())
        )

        items = [self._to_entity(model) for model in result.scalars().all()]
        self._log.info("deck.list", count=len(items), user_id=owner_id)
        return items

    async def update(
        self, deck_id: UUID, owner_id: UUID, values: Dict[str, Any]
    ) -> Optional[Deck]:
        """Apply ``values`` to an owned deck through the ORM so the guard runs."""
        deck_model = await self._get_owned_model(deck_id, owner_id)
        if not deck_model:
            return None

        for key, value in values.items():
            setattr(deck_model, key, value)
        # Dirty even when no value changed, so the guard still bumps updated_at
        flag_modified(deck_model, "updated_at")
        await self.session.flush()

        self._log.info("deck.update", deck_id=deck_id, fields=sorted(values))
        return self._to_entity(deck_model)

    async def delete(self, deck_id: UUID, owner_id: UUID) -> bool:
        """Delete an owned deck; its cards go with it via ON DELETE CASCADE."""
        result = await self.session.execute(
            delete(DeckModel).where(
                DeckModel.id == deck_id, DeckModel.user_id == owner_id
            )
        )
        deleted = result.rowcount > 0
        self._log.info("deck.delete", deck_id=deck_id, deleted=deleted)
        return deleted

    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        result = await self.session.execute(
            delete(DeckModel).where(DeckModel.user_id == owner_id)
        )
        self._log.info("deck.delete_all", user_id=owner_id, count=result.rowcount)
        return result.rowcount

    async def _get_owned_model(
        self, deck_id: UUID, owner_id: UUID
    ) -> Optional[DeckModel]:
        result = await self.session.execute(
            select(DeckModel).where(
                DeckModel.id == deck_id, DeckModel.user_id == owner_id
            )
        )
        return result.scalar_one_or_none()

    def _to_entity(self, model: DeckModel) -> Deck:
        """Convert SQLAlchemy model to domain entity."""
        return Deck(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
