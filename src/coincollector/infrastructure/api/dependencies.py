"""FastAPI dependencies for storage services and the calling user.

Services are built per request from the application's session factory; each
service call runs in its own transaction.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coincollector.core.config import get_settings
from coincollector.core.logging import get_logger
from coincollector.domain.entities import User
from coincollector.domain.exceptions import InvalidArgumentError, NotFoundError
from coincollector.domain.services import (
    CoinStorageService,
    CollectionStorageService,
    GroupStorageService,
    OwnershipService,
    UserStorageService,
)
from coincollector.infrastructure.persistence.database import get_session_factory

logger = get_logger(__name__)

SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]


def get_coin_service(session_factory: SessionFactory) -> CoinStorageService:
    return CoinStorageService(session_factory)


CoinService = Annotated[CoinStorageService, Depends(get_coin_service)]


def get_collection_service(
    session_factory: SessionFactory, coin_service: CoinService
) -> CollectionStorageService:
    return CollectionStorageService(session_factory, coin_service=coin_service)


CollectionService = Annotated[CollectionStorageService, Depends(get_collection_service)]


def get_group_service(
    session_factory: SessionFactory, collection_service: CollectionService
) -> GroupStorageService:
    return GroupStorageService(session_factory, collection_service=collection_service)


GroupService = Annotated[GroupStorageService, Depends(get_group_service)]


def get_user_service(session_factory: SessionFactory) -> UserStorageService:
    return UserStorageService(session_factory)


UserService = Annotated[UserStorageService, Depends(get_user_service)]


def get_ownership_service(
    group_service: GroupService,
    collection_service: CollectionService,
    coin_service: CoinService,
) -> OwnershipService:
    return OwnershipService(group_service, collection_service, coin_service)


Ownership = Annotated[OwnershipService, Depends(get_ownership_service)]


async def get_current_user(request: Request, user_service: UserService) -> User:
    """Resolve the calling user from the user id header.

    Raises:
        HTTPException: 401 if the header is missing or names no known user.
    """
    header = get_settings().user_id_header
    user_id = request.headers.get(header)
    if not user_id:
        logger.info("Authentication failed: missing user header", header=header)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Missing {header} header",
        )

    try:
        return await user_service.get_by_id(user_id)
    except (NotFoundError, InvalidArgumentError):
        logger.info("Authentication failed: unknown user", user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unknown user",
        )


# Type alias for dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
