"""Storage service for collections.

Saving a collection cascades to its coins inside the same transaction: each
coin is inserted, or updated in place when it already exists. Reading a
collection attaches the coins whose ``collection_id`` matches.
"""

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Collection
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    CoinsLoadFailedError,
    DeleteFailedError,
    GetAllFailedError,
    GetByIdFailedError,
    InvalidArgumentError,
    NotFoundError,
    SaveFailedError,
    StorageError,
    UpdateFailedError,
)
from coincollector.domain.services.coin_storage_service import CoinStorageService
from coincollector.domain.services.unit_of_work import SaveOutcome, require_id, unit_of_work
from coincollector.infrastructure.persistence.repositories import CollectionRepository

logger = get_logger(__name__)


class CollectionStorageService:
    """Persist collections together with their coins."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        coin_service: CoinStorageService | None = None,
        repository_factory: Callable[[AsyncSession], CollectionRepository] = CollectionRepository,
    ) -> None:
        """Initialize the service.

        Args:
            session_factory: Factory for sessions of self-managed calls.
            coin_service: Service used for the collection's coins.
            repository_factory: Builds the collection repository for a session.
        """
        self.session_factory = session_factory
        self.coin_service = coin_service or CoinStorageService(session_factory)
        self.repository_factory = repository_factory

    async def save(self, collection: Collection, session: AsyncSession | None = None) -> Collection:
        """Insert a new collection and upsert its coins.

        Raises:
            InvalidArgumentError: If collection is None.
            AlreadyExistsError: If a collection with the same id exists.
            SaveFailedError: If the collection or any of its coins cannot be
                written. A self-managed call has rolled back by then.
        """
        outcome = await self.insert_if_absent(collection, session=session)
        if outcome is SaveOutcome.ALREADY_EXISTED:
            raise AlreadyExistsError("collection", collection.id)
        return collection

    async def insert_if_absent(
        self, collection: Collection, session: AsyncSession | None = None
    ) -> SaveOutcome:
        """Insert the collection and its coins unless the collection exists.

        An existing collection is left untouched, coins included.

        Returns:
            INSERTED when the collection was written, ALREADY_EXISTED otherwise.

        Raises:
            InvalidArgumentError: If collection is None.
            AlreadyExistsError: If the insert hit a primary key violation.
            SaveFailedError: If the collection or any of its coins cannot be
                written.
        """
        if collection is None:
            raise InvalidArgumentError("collection", message="Collection is required")
        require_id("collection", collection.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                repository = self.repository_factory(s)
                if await repository.exists(collection.id):
                    logger.debug("Collection already exists", collection_id=collection.id)
                    return SaveOutcome.ALREADY_EXISTED
                await repository.create(collection)
                for coin in collection.coins:
                    if await self.coin_service.insert_if_absent(coin, session=s) is SaveOutcome.ALREADY_EXISTED:
                        await self.coin_service.update(coin, session=s)
        except IntegrityError as e:
            logger.warning("Concurrent collection insert", collection_id=collection.id, error=str(e))
            raise AlreadyExistsError("collection", collection.id, cause=e) from e
        except (SQLAlchemyError, StorageError) as e:
            logger.error("Failed to save collection", collection_id=collection.id, error=str(e))
            raise SaveFailedError("collection", collection.id, cause=e) from e

        logger.info(
            "Collection saved",
            collection_id=collection.id,
            group_id=collection.group_id,
            coin_count=collection.coin_count,
        )
        return SaveOutcome.INSERTED

    async def get_by_id(
        self, collection_id: str, session: AsyncSession | None = None
    ) -> Collection:
        """Load a collection with its coins.

        Raises:
            NotFoundError: If the collection does not exist.
            GetByIdFailedError: If the collection row cannot be read.
            CoinsLoadFailedError: If the coins cannot be read.
        """
        require_id("collection", collection_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                collection = await self.repository_factory(s).read(collection_id)
                if collection is None:
                    raise NotFoundError("collection", collection_id)
                try:
                    coins = await self.coin_service.get_all(session=s)
                except GetAllFailedError as e:
                    raise CoinsLoadFailedError("collection", collection_id, cause=e.cause) from e
        except SQLAlchemyError as e:
            logger.error("Failed to read collection", collection_id=collection_id, error=str(e))
            raise GetByIdFailedError("collection", collection_id, cause=e) from e

        for coin in coins:
            if coin.collection_id == collection.id:
                collection.add_coin(coin)
        return collection

    async def update_metadata(
        self, collection: Collection, session: AsyncSession | None = None
    ) -> None:
        """Update name and group of a collection; its coins are not touched.

        Raises:
            UpdateFailedError: If collection is None, its row is missing or
                the write fails.
        """
        if collection is None:
            raise UpdateFailedError("collection", message="Collection is required")
        require_id("collection", collection.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                await self.repository_factory(s).update(collection)
        except SQLAlchemyError as e:
            logger.error("Failed to update collection", collection_id=collection.id, error=str(e))
            raise UpdateFailedError("collection", collection.id, cause=e) from e

    async def delete(
        self,
        collection_id: str,
        session: AsyncSession | None = None,
        cascade: bool = False,
    ) -> None:
        """Delete a collection.

        Args:
            collection_id: ID of the collection.
            session: Caller's session, if any.
            cascade: Also delete the collection's coins. Without it the coin
                rows are left in place.

        Raises:
            DeleteFailedError: If the row is missing or a delete fails.
        """
        require_id("collection", collection_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                if cascade:
                    await self.coin_service.delete_by_collection(collection_id, session=s)
                await self.repository_factory(s).delete(collection_id)
        except (SQLAlchemyError, StorageError) as e:
            logger.error("Failed to delete collection", collection_id=collection_id, error=str(e))
            raise DeleteFailedError("collection", collection_id, cause=e) from e

    async def delete_by_group(self, group_id: str, session: AsyncSession | None = None) -> int:
        """Delete every collection of a group together with its coins.

        Returns:
            Number of deleted collections.

        Raises:
            DeleteFailedError: If a read or delete fails.
        """
        require_id("group", group_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                repository = self.repository_factory(s)
                collections = [c for c in await repository.get_all() if c.group_id == group_id]
                for collection in collections:
                    await self.coin_service.delete_by_collection(collection.id, session=s)
                    await repository.delete(collection.id)
        except (SQLAlchemyError, StorageError) as e:
            logger.error("Failed to delete collections", group_id=group_id, error=str(e))
            raise DeleteFailedError(
                "collection",
                cause=e,
                message=f"Failed to delete collections of group {group_id}: {e}",
            ) from e

        logger.info("Collections deleted", group_id=group_id, count=len(collections))
        return len(collections)

    async def get_all(self, session: AsyncSession | None = None) -> list[Collection]:
        """Load every collection with its coins.

        All coins are read once and attached through an id-keyed map. Coins
        whose collection does not exist are skipped.

        Raises:
            GetAllFailedError: If the collections or the coins cannot be read.
        """
        try:
            async with unit_of_work(self.session_factory, session) as s:
                collections = await self.repository_factory(s).get_all()
                coins = await self.coin_service.get_all(session=s)
        except (SQLAlchemyError, GetAllFailedError) as e:
            logger.error("Failed to load collections", error=str(e))
            raise GetAllFailedError("collection", cause=e) from e

        by_id = {collection.id: collection for collection in collections}
        for coin in coins:
            collection = by_id.get(coin.collection_id)
            if collection is None:
                logger.debug("Skipping orphaned coin", coin_id=coin.id, collection_id=coin.collection_id)
                continue
            collection.add_coin(coin)
        return collections

    async def get_all_by_group(
        self, group_id: str, session: AsyncSession | None = None
    ) -> list[Collection]:
        """Load every collection of one group with its coins."""
        collections = await self.get_all(session=session)
        return [collection for collection in collections if collection.group_id == group_id]
