"""Ownership checks used before a user may see or change an entity.

Coins belong to collections, collections to groups and groups to users. A
resource owned by someone else is reported as missing, so callers cannot
probe for ids they do not own.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Coin, Collection, Group
from coincollector.domain.exceptions import NotFoundError
from coincollector.domain.services.coin_storage_service import CoinStorageService
from coincollector.domain.services.collection_storage_service import CollectionStorageService
from coincollector.domain.services.group_storage_service import GroupStorageService

logger = get_logger(__name__)


class OwnershipService:
    """Resolve an entity and verify that it belongs to a user."""

    def __init__(
        self,
        group_service: GroupStorageService,
        collection_service: CollectionStorageService,
        coin_service: CoinStorageService,
    ) -> None:
        self.group_service = group_service
        self.collection_service = collection_service
        self.coin_service = coin_service

    async def require_group_owner(
        self, user_id: str, group_id: str, session: AsyncSession | None = None
    ) -> Group:
        """Load a group owned by the user.

        Raises:
            NotFoundError: If the group does not exist or has another owner.
        """
        group = await self.group_service.get_by_id(group_id, session=session)
        if group.owner_id != user_id:
            logger.info("Group access denied", group_id=group_id, user_id=user_id)
            raise NotFoundError("group", group_id)
        return group

    async def require_collection_owner(
        self, user_id: str, collection_id: str, session: AsyncSession | None = None
    ) -> Collection:
        """Load a collection whose group is owned by the user.

        Raises:
            NotFoundError: If the collection does not exist or belongs to a
                group the user does not own.
        """
        collection = await self.collection_service.get_by_id(collection_id, session=session)
        try:
            await self.require_group_owner(user_id, collection.group_id, session=session)
        except NotFoundError as e:
            raise NotFoundError("collection", collection_id, cause=e) from e
        return collection

    async def require_coin_owner(
        self, user_id: str, coin_id: str, session: AsyncSession | None = None
    ) -> Coin:
        """Load a coin whose collection is owned by the user.

        Raises:
            NotFoundError: If the coin does not exist or belongs to a
                collection the user does not own.
        """
        coin = await self.coin_service.get_by_id(coin_id, session=session)
        try:
            await self.require_collection_owner(user_id, coin.collection_id, session=session)
        except NotFoundError as e:
            raise NotFoundError("coin", coin_id, cause=e) from e
        return coin
