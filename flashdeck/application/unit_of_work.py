"""
Unit of Work pattern implementation for transaction boundaries.

Every store operation runs inside exactly one ``async with uow:`` block and
either commits explicitly or is rolled back on exit, so a failed operation
never leaves partial writes behind.
"""

from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.application.ports import (
    CardRepositoryPort,
    DeckRepositoryPort,
    EventRepositoryPort,
    OwnerRepositoryPort,
)
from flashdeck.infra.config.settings import get_settings


class UnitOfWork:
    """
    Unit of Work implementation that manages transaction boundaries
    and provides access to repositories within a transaction context.
    """

    def __init__(
        self,
        session: AsyncSession,
        owner_repo: OwnerRepositoryPort,
        deck_repo: DeckRepositoryPort,
        card_repo: CardRepositoryPort,
        event_repo: EventRepositoryPort,
        lock_timeout_ms: Optional[int] = None,
    ):
        self.session = session
        self.owner_repo = owner_repo
        self.deck_repo = deck_repo
        self.card_repo = card_repo
        self.event_repo = event_repo
        self.lock_timeout_ms = (
            get_settings().lock_timeout_ms if lock_timeout_ms is None else lock_timeout_ms
        )
        self.isolation_level: Optional[str] = None
        self._committed = False

    @classmethod
    def for_session(cls, session: AsyncSession, **kwargs) -> "UnitOfWork":
        """Build a unit of work wired to the SQLAlchemy repositories."""
        from flashdeck.data.repositories import (
            CardRepository,
            DeckRepository,
            EventRepository,
            OwnerRepository,
        )

        return cls(
            session=session,
            owner_repo=OwnerRepository(session),
            deck_repo=DeckRepository(session),
            card_repo=CardRepository(session),
            event_repo=EventRepository(session),
            **kwargs,
        )

    def with_isolation(self, level: Optional[str]) -> "UnitOfWork":
        """Request an isolation level for the next transaction (PostgreSQL only)."""
        self.isolation_level = level
        return self

    async def __aenter__(self):
        """Enter transaction context."""
        self._committed = False
        if self._dialect_name() == "postgresql":
            if self.isolation_level:
                # Must be the first statement of the transaction
                await self.session.connection(
                    execution_options={"isolation_level": self.isolation_level}
                )
            if self.lock_timeout_ms:
                await self.session.execute(
                    text(f"SET LOCAL lock_timeout = {int(self.lock_timeout_ms)}")
                )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit transaction context with cleanup."""
        if exc_type is not None or not self._committed:
            await self.rollback()
        self.isolation_level = None

    async def commit(self):
        """
        Commit the transaction.

        This makes all changes within the transaction permanent.
        """
        await self.session.commit()
        self._committed = True

    async def rollback(self):
        """
        Rollback the transaction.

        This discards all changes made within the transaction.
        """
        await self.session.rollback()

    @property
    def is_committed(self) -> bool:
        """Check if the transaction has been committed."""
        return self._committed

    def _dialect_name(self) -> Optional[str]:
        bind = self.session.get_bind() if isinstance(self.session, AsyncSession) else None
        return bind.dialect.name if bind is not None else None
