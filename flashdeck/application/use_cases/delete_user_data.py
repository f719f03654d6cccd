"""
Use Case: Delete All User Data (GDPR erasure)

Hard-deletes everything a principal owns in one transaction:
1. Verify the requester is the owner being erased
2. Delete events, then cards, then decks (children before parents)
3. Commit, or roll back everything if any step fails

Cards are deleted explicitly rather than through the deck cascade. The
owner row itself is left alone; the identity belongs to the identity provider
(see ForgetIdentityUseCase).
"""

from dataclasses import dataclass
from uuid import UUID

from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.domain_core.exceptions import ForbiddenError
from flashdeck.infra.config.logging_config import bind_context, get_logger
from flashdeck.infra.config.settings import get_settings


@dataclass(frozen=True)
class DeletionReport:
    owner_id: UUID
    events: int
    cards: int
    decks: int

    @property
    def total(self) -> int:
        return self.events + self.cards + self.decks


class DeleteUserDataUseCase:
    """
    Use case for irreversible erasure of one owner's decks, cards and events.

    Running it again for an already-purged owner succeeds with zero counts.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow
        self._log = get_logger("usecase.delete_user_data")

    async def execute(self, requesting_principal: UUID, target_owner: UUID) -> DeletionReport:
        """
        Execute the erasure.

        Args:
            requesting_principal: Authenticated caller
            target_owner: Owner whose data is erased

        Returns:
            DeletionReport with the number of rows removed per table

        Raises:
            ForbiddenError: requester and target differ
        """
        bind_context(owner_id=target_owner)
        if requesting_principal != target_owner:
            self._log.warning(
                "usecase.forbidden", requesting_principal=requesting_principal
            )
            raise ForbiddenError()

        self._log.info("usecase.start", action="delete_user_data")

        self.uow.with_isolation(get_settings().deletion_isolation_level)
        async with self.uow:
            events = await self.uow.event_repo.delete_all_for_owner(target_owner)
            cards = await self.uow.card_repo.delete_all_for_owner(target_owner)
            decks = await self.uow.deck_repo.delete_all_for_owner(target_owner)
            await self.uow.commit()

        report = DeletionReport(
            owner_id=target_owner, events=events, cards=cards, decks=decks
        )
        self._log.info(
            "usecase.success",
            events=report.events,
            cards=report.cards,
            decks=report.decks,
        )
        return report
