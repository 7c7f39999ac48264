"""Storage service for coins, the leaf of the aggregate.

All operations are single-table. The collection storage service calls
``insert_if_absent`` and ``update`` with its own session while saving a
collection, so coin writes become part of the collection's transaction.
"""

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Coin
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    DeleteFailedError,
    GetAllFailedError,
    InvalidArgumentError,
    NotFoundError,
    SaveFailedError,
    UpdateFailedError,
)
from coincollector.domain.services.unit_of_work import SaveOutcome, require_id, unit_of_work
from coincollector.infrastructure.persistence.repositories import CoinRepository

logger = get_logger(__name__)


class CoinStorageService:
    """Persist and load coins."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        repository_factory: Callable[[AsyncSession], CoinRepository] = CoinRepository,
    ) -> None:
        """Initialize the service.

        Args:
            session_factory: Factory for sessions of self-managed calls.
            repository_factory: Builds the coin repository for a session.
        """
        self.session_factory = session_factory
        self.repository_factory = repository_factory

    async def save(self, coin: Coin, session: AsyncSession | None = None) -> Coin:
        """Insert a new coin.

        Raises:
            InvalidArgumentError: If coin is None.
            AlreadyExistsError: If a coin with the same id exists.
            SaveFailedError: If the insert fails.
        """
        if await self.insert_if_absent(coin, session=session) is SaveOutcome.ALREADY_EXISTED:
            raise AlreadyExistsError("coin", coin.id)
        return coin

    async def insert_if_absent(
        self, coin: Coin, session: AsyncSession | None = None
    ) -> SaveOutcome:
        """Insert the coin unless a row with its id already exists.

        Returns:
            INSERTED when the row was written, ALREADY_EXISTED otherwise.

        Raises:
            InvalidArgumentError: If coin is None.
            AlreadyExistsError: If the insert hit a primary key violation.
            SaveFailedError: If the existence check or the insert fails.
        """
        if coin is None:
            raise InvalidArgumentError("coin", message="Coin is required")
        require_id("coin", coin.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                repository = self.repository_factory(s)
                if await repository.exists(coin.id):
                    logger.debug("Coin already exists", coin_id=coin.id)
                    return SaveOutcome.ALREADY_EXISTED
                await repository.create(coin)
        except IntegrityError as e:
            logger.warning("Concurrent coin insert", coin_id=coin.id, error=str(e))
            raise AlreadyExistsError("coin", coin.id, cause=e) from e
        except SQLAlchemyError as e:
            logger.error("Failed to save coin", coin_id=coin.id, error=str(e))
            raise SaveFailedError("coin", coin.id, cause=e) from e

        return SaveOutcome.INSERTED

    async def get_by_id(self, coin_id: str, session: AsyncSession | None = None) -> Coin:
        """Load a coin.

        A failing read is reported the same way as a missing row.

        Raises:
            NotFoundError: If the coin does not exist or cannot be read.
        """
        require_id("coin", coin_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                coin = await self.repository_factory(s).read(coin_id)
        except SQLAlchemyError as e:
            logger.warning("Failed to read coin", coin_id=coin_id, error=str(e))
            raise NotFoundError("coin", coin_id, cause=e) from e

        if coin is None:
            raise NotFoundError("coin", coin_id)
        return coin

    async def update(self, coin: Coin, session: AsyncSession | None = None) -> None:
        """Overwrite the coin row with the coin's current fields.

        Raises:
            InvalidArgumentError: If coin is None.
            UpdateFailedError: If the row is missing or the write fails.
        """
        if coin is None:
            raise InvalidArgumentError("coin", message="Coin is required")
        require_id("coin", coin.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                await self.repository_factory(s).update(coin)
        except SQLAlchemyError as e:
            logger.error("Failed to update coin", coin_id=coin.id, error=str(e))
            raise UpdateFailedError("coin", coin.id, cause=e) from e

    async def delete(self, coin_id: str, session: AsyncSession | None = None) -> None:
        """Delete a coin.

        Raises:
            DeleteFailedError: If the row is missing or the delete fails.
        """
        require_id("coin", coin_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                await self.repository_factory(s).delete(coin_id)
        except SQLAlchemyError as e:
            logger.error("Failed to delete coin", coin_id=coin_id, error=str(e))
            raise DeleteFailedError("coin", coin_id, cause=e) from e

    async def delete_by_collection(
        self, collection_id: str, session: AsyncSession | None = None
    ) -> int:
        """Delete every coin of a collection.

        Returns:
            Number of deleted coins.

        Raises:
            DeleteFailedError: If the delete fails.
        """
        require_id("collection", collection_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                return await self.repository_factory(s).delete_by_collection(collection_id)
        except SQLAlchemyError as e:
            logger.error("Failed to delete coins", collection_id=collection_id, error=str(e))
            raise DeleteFailedError(
                "coin",
                cause=e,
                message=f"Failed to delete coins of collection {collection_id}: {e}",
            ) from e

    async def get_all(self, session: AsyncSession | None = None) -> list[Coin]:
        """Load every coin, regardless of collection.

        Raises:
            GetAllFailedError: If the read fails.
        """
        try:
            async with unit_of_work(self.session_factory, session) as s:
                return await self.repository_factory(s).get_all()
        except SQLAlchemyError as e:
            logger.error("Failed to load coins", error=str(e))
            raise GetAllFailedError("coin", cause=e) from e

    async def get_all_by_collection(
        self, collection_id: str, session: AsyncSession | None = None
    ) -> list[Coin]:
        """Load every coin of one collection."""
        coins = await self.get_all(session=session)
        return [coin for coin in coins if coin.collection_id == collection_id]

    async def move(
        self, coin: Coin, collection_id: str, session: AsyncSession | None = None
    ) -> Coin:
        """Move a coin to another collection.

        The coin row is deleted and recreated under a fresh id within one
        transaction; year, value and mint data are carried over.

        Returns:
            The recreated coin.

        Raises:
            InvalidArgumentError: If coin or collection_id is missing.
            UpdateFailedError: If the delete or the insert fails.
        """
        if coin is None:
            raise InvalidArgumentError("coin", message="Coin is required")
        require_id("coin", coin.id)
        require_id("collection", collection_id)

        moved = Coin.create(
            year=coin.year,
            value=coin.value,
            mint_country=coin.mint_country,
            collection_id=collection_id,
            mint=coin.mint,
            description=coin.description,
        )
        try:
            async with unit_of_work(self.session_factory, session) as s:
                repository = self.repository_factory(s)
                await repository.delete(coin.id)
                await repository.create(moved)
        except SQLAlchemyError as e:
            logger.error("Failed to move coin", coin_id=coin.id, error=str(e))
            raise UpdateFailedError("coin", coin.id, cause=e) from e

        logger.info(
            "Coin moved",
            old_coin_id=coin.id,
            coin_id=moved.id,
            collection_id=collection_id,
        )
        return moved
