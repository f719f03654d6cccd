"""
Owner repository: local mirror rows for identity-provider users.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.application.ports import OwnerRepositoryPort
from flashdeck.data.models.owner_model import OwnerModel
from flashdeck.domain_core.clock import utcnow
from flashdeck.infra.config.logging_config import get_logger

_UPSERT_DIALECTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


class OwnerRepository(OwnerRepositoryPort):
    def __init__(self, session: AsyncSession):
        self.session = session
        self._log = get_logger("repo.owner")

    async def ensure(self, owner_id: UUID) -> None:
        """Insert the owner row unless it already exists (race-safe)."""
        dialect = self.session.get_bind().dialect.name
        insert_fn = _UPSERT_DIALECTS.get(dialect)

        if insert_fn is None:
            if not await self._exists(owner_id):
                self.session.add(OwnerModel(id=owner_id, created_at=utcnow()))
                await self.session.flush()
            return

        await self.session.execute(
            insert_fn(OwnerModel)
            .values(id=owner_id, created_at=utcnow())
            .on_conflict_do_nothing(index_elements=["id"])
        )

    async def _exists(self, owner_id: UUID) -> bool:
        result = await self.session.execute(
            select(OwnerModel.id).where(OwnerModel.id == owner_id)
        )
        return result.scalar_one_or_none() is not None

    async def remove(self, owner_id: UUID) -> bool:
        """Delete the owner row; decks, cards and events follow by FK cascade."""
        result = await self.session.execute(
            delete(OwnerModel).where(OwnerModel.id == owner_id)
        )
        removed = result.rowcount > 0
        self._log.info("owner.remove", owner_id=owner_id, removed=removed)
        return removed
