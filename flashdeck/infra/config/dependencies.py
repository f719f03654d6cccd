"""
FastAPI dependency injection: session, caller identity and application services.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from flashdeck.application.services import CardStore, DeckStore, EventLog
from flashdeck.application.unit_of_work import UnitOfWork
from flashdeck.application.use_cases import DeleteUserDataUseCase
from flashdeck.infra.auth.jwt_auth import get_jwt_auth
from flashdeck.infra.config.database import get_db_session
from flashdeck.infra.config.logging_config import bind_context, get_logger
from flashdeck.infra.config.settings import get_settings

DEV_USER_ID = UUID("12345678-1234-5678-9012-123456789012")


async def get_current_user_id(
    authorization: Annotated[str | None, Header()] = None,
) -> UUID:
    """Extract the owner id from the bearer token."""
    settings = get_settings()
    logger = get_logger("auth")

    # Skip auth in development if disabled
    if settings.disable_auth:
        bind_context(principal=DEV_USER_ID)
        return DEV_USER_ID

    if not authorization:
        logger.info("auth.missing_header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid scheme")
    except ValueError:
        logger.info("auth.invalid_header_format")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = get_jwt_auth().extract_user_id_from_token(token)
    bind_context(principal=user_id)
    return user_id


DatabaseSession = Annotated[AsyncSession, Depends(get_db_session)]
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]


def get_unit_of_work(session: DatabaseSession) -> UnitOfWork:
    return UnitOfWork.for_session(session)


UnitOfWorkDep = Annotated[UnitOfWork, Depends(get_unit_of_work)]


def get_deck_store(uow: UnitOfWorkDep) -> DeckStore:
    return DeckStore(uow)


def get_card_store(uow: UnitOfWorkDep) -> CardStore:
    return CardStore(uow)


def get_event_log(uow: UnitOfWorkDep) -> EventLog:
    return EventLog(uow)


def get_delete_user_data_use_case(uow: UnitOfWorkDep) -> DeleteUserDataUseCase:
    return DeleteUserDataUseCase(uow)


DeckStoreDep = Annotated[DeckStore, Depends(get_deck_store)]
CardStoreDep = Annotated[CardStore, Depends(get_card_store)]
EventLogDep = Annotated[EventLog, Depends(get_event_log)]
DeleteUserDataDep = Annotated[
    DeleteUserDataUseCase, Depends(get_delete_user_data_use_case)
]
