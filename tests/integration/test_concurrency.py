"""
Two writers racing to create the same card in the same deck.

Uses a file-backed SQLite database so each store gets its own connection.
"""

import asyncio

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flashdeck.application.services import CardStore, DeckStore
from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.data import Base
from flashdeck.data.models import CardModel
from flashdeck.domain_core.exceptions import ConflictError
from flashdeck.infra.config.database import build_engine


@pytest.fixture
async def file_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'race.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.mark.integration
async def test_concurrent_duplicate_create_has_one_winner(file_engine, owner_id):
    factory = async_sessionmaker(file_engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as setup_session:
        deck = await DeckStore(UnitOfWork.for_session(setup_session)).create(
            owner_id, "Biology"
        )

    async def create(front):
        async with factory() as session:
            store = CardStore(UnitOfWork.for_session(session))
            return await store.create(deck.id, owner_id, front, "Energy currency")

    results = await asyncio.gather(
        create("What is ATP?"), create("what is  ATP?"), return_exceptions=True
    )

    winners = [r for r in results if not isinstance(r, Exception)]
    losers = [r for r in results if isinstance(r, Exception)]
    assert len(winners) == 1
    assert len(losers) == 1
    assert isinstance(losers[0], ConflictError)

    async with factory() as session:
        count = await session.execute(
            select(func.count()).select_from(CardModel).where(CardModel.deck_id == deck.id)
        )
        assert count.scalar_one() == 1
