"""
Use Case: Forget Identity

Called when the identity provider has removed a user. Deleting the local
owner row lets ON DELETE CASCADE remove decks, cards and events, reaching
the same end state as DeleteUserDataUseCase without enumerating tables.
"""

from uuid import UUID

from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.infra.config.logging_config import bind_context, get_logger


class ForgetIdentityUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("usecase.forget_identity")

    async def execute(self, owner_id: UUID) -> bool:
        """Returns False when the owner was never seen (nothing to cascade)."""
        bind_context(owner_id=owner_id)

        async with self.uow:
            removed = await self.uow.owner_repo.remove(owner_id)
            await self.uow.commit()

        self._log.info("usecase.success", removed=removed)
        return removed
