"""Repository for collection database operations.

Only the collection's own row is handled here; coins are persisted through
the coin repository.
"""

from sqlalchemy import delete, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Collection
from coincollector.infrastructure.persistence.models import CollectionModel

logger = get_logger(__name__)


def collection_from_model(model: CollectionModel) -> Collection | None:
    """Build a coin-less collection from its row, or None if the row is invalid."""
    try:
        return Collection(id=model.id, name=model.name, group_id=model.group_id)
    except ValueError as e:
        logger.warning("Invalid collection row", collection_id=model.id, error=str(e))
        return None


class CollectionRepository:
    """Repository for collection database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, collection: Collection) -> Collection:
        """Insert the collection row (without its coins)."""
        self.session.add(
            CollectionModel(id=collection.id, name=collection.name, group_id=collection.group_id)
        )
        await self.session.flush()
        logger.info("Collection created", collection_id=collection.id, group_id=collection.group_id)
        return collection

    async def read(self, collection_id: str) -> Collection | None:
        result = await self.session.execute(
            select(CollectionModel).where(CollectionModel.id == collection_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            logger.debug("Collection not found", collection_id=collection_id)
            return None
        return collection_from_model(model)

    async def update(self, collection: Collection) -> None:
        """Update name and group of the collection row.

        Raises:
            NoResultFound: If no row with the collection's id exists.
        """
        result = await self.session.execute(
            update(CollectionModel)
            .where(CollectionModel.id == collection.id)
            .values(name=collection.name, group_id=collection.group_id)
        )
        if result.rowcount != 1:
            raise NoResultFound(
                f"Collection update affected {result.rowcount} rows: {collection.id}"
            )
        logger.info("Collection updated", collection_id=collection.id, group_id=collection.group_id)

    async def delete(self, collection_id: str) -> None:
        """Delete the collection row.

        Raises:
            NoResultFound: If no row with this id exists.
        """
        result = await self.session.execute(
            delete(CollectionModel).where(CollectionModel.id == collection_id)
        )
        if result.rowcount != 1:
            raise NoResultFound(
                f"Collection delete affected {result.rowcount} rows: {collection_id}"
            )
        logger.info("Collection deleted", collection_id=collection_id)

    async def exists(self, collection_id: str) -> bool:
        result = await self.session.execute(
            select(CollectionModel.id).where(CollectionModel.id == collection_id)
        )
        return result.scalar_one_or_none() is not None

    async def get_all(self) -> list[Collection]:
        """Get every collection row; coin lists are left empty."""
        result = await self.session.execute(select(CollectionModel))
        collections = [
            collection
            for collection in map(collection_from_model, result.scalars().all())
            if collection is not None
        ]
        logger.debug("Collections read", count=len(collections))
        return collections
