"""
Account router: right-to-erasure endpoint.
"""

from uuid import UUID

from fastapi import APIRouter

from flashdeck.api.schemas.account_io import DeletionReportResponse
from flashdeck.infra.config.dependencies import CurrentUserId, DeleteUserDataDep

router = APIRouter(prefix="/account", tags=["account"])


@router.delete("/data/{owner_id}", response_model=DeletionReportResponse)
async def delete_account_data(
    owner_id: UUID,
    current_user: CurrentUserId,
    use_case: DeleteUserDataDep,
) -> DeletionReportResponse:
    """
    Permanently delete every deck, card and event owned by ``owner_id``.

    Callers may only erase their own data; anything else is 403. Repeating
    the request after a successful erasure returns zero counts.
    """
    report = await use_case.execute(
        requesting_principal=current_user, target_owner=owner_id
    )
    return DeletionReportResponse(
        owner_id=report.owner_id,
        events=report.events,
        cards=report.cards,
        decks=report.decks,
        total=report.total,
    )
