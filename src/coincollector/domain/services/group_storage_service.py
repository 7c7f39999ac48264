"""Storage service for groups, the root of the aggregate.

A group save writes the group row and upserts every attached collection in
one transaction. Existing collections only get their metadata updated;
their coins are saved through the collection service separately.
"""

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Group
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    DeleteFailedError,
    GetAllFailedError,
    GetByIdFailedError,
    InvalidArgumentError,
    NotFoundError,
    SaveFailedError,
    StorageError,
    UpdateFailedError,
)
from coincollector.domain.services.collection_storage_service import CollectionStorageService
from coincollector.domain.services.unit_of_work import SaveOutcome, require_id, unit_of_work
from coincollector.infrastructure.persistence.repositories import GroupRepository

logger = get_logger(__name__)


class GroupStorageService:
    """Persist groups together with their collections."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        collection_service: CollectionStorageService | None = None,
        repository_factory: Callable[[AsyncSession], GroupRepository] = GroupRepository,
    ) -> None:
        """Initialize the service.

        Args:
            session_factory: Factory for sessions of self-managed calls.
            collection_service: Service used for the group's collections.
            repository_factory: Builds the group repository for a session.
        """
        self.session_factory = session_factory
        self.collection_service = collection_service or CollectionStorageService(session_factory)
        self.repository_factory = repository_factory

    async def save(self, group: Group, session: AsyncSession | None = None) -> SaveOutcome:
        """Save a group and upsert its collections.

        A group saved a second time by the same owner has its name updated
        instead of failing.

        Returns:
            INSERTED for a new group row, ALREADY_EXISTED when it was updated.

        Raises:
            InvalidArgumentError: If group is None.
            AlreadyExistsError: If the id belongs to another owner's group or
                the insert hit a primary key violation.
            SaveFailedError: If the group or any of its collections cannot be
                written. A self-managed call has rolled back by then.
        """
        if group is None:
            raise InvalidArgumentError("group", message="Group is required")
        require_id("group", group.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                outcome = await self._write_row(self.repository_factory(s), group)
                for collection in group.collections:
                    inserted = await self.collection_service.insert_if_absent(collection, session=s)
                    if inserted is SaveOutcome.ALREADY_EXISTED:
                        await self.collection_service.update_metadata(collection, session=s)
        except IntegrityError as e:
            logger.warning("Concurrent group insert", group_id=group.id, error=str(e))
            raise AlreadyExistsError("group", group.id, cause=e) from e
        except AlreadyExistsError as e:
            if e.entity_type == "group":
                raise
            logger.error("Failed to save group", group_id=group.id, error=str(e))
            raise SaveFailedError("group", group.id, cause=e) from e
        except (SQLAlchemyError, StorageError) as e:
            logger.error("Failed to save group", group_id=group.id, error=str(e))
            raise SaveFailedError("group", group.id, cause=e) from e

        logger.info(
            "Group saved",
            group_id=group.id,
            owner_id=group.owner_id,
            outcome=outcome.value,
            collection_count=group.total_collections,
        )
        return outcome

    async def _write_row(self, repository: GroupRepository, group: Group) -> SaveOutcome:
        existing = await repository.read(group.id)
        if existing is None:
            await repository.create(group)
            return SaveOutcome.INSERTED
        if existing.owner_id != group.owner_id:
            raise AlreadyExistsError("group", group.id)
        await repository.update(group)
        return SaveOutcome.ALREADY_EXISTED

    async def get_by_id(self, group_id: str, session: AsyncSession | None = None) -> Group:
        """Load a group with its collections and their coins.

        Raises:
            NotFoundError: If the group does not exist.
            GetByIdFailedError: If the group or its collections cannot be read.
        """
        require_id("group", group_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                group = await self.repository_factory(s).read(group_id)
                if group is None:
                    raise NotFoundError("group", group_id)
                collections = await self.collection_service.get_all(session=s)
        except (SQLAlchemyError, GetAllFailedError) as e:
            logger.error("Failed to read group", group_id=group_id, error=str(e))
            raise GetByIdFailedError("group", group_id, cause=e) from e

        for collection in collections:
            if collection.group_id == group.id:
                group.add_collection(collection)
        return group

    async def update_metadata(self, group: Group, session: AsyncSession | None = None) -> None:
        """Update the group name; its collections are not touched.

        Raises:
            InvalidArgumentError: If group is None.
            UpdateFailedError: If the row is missing or the write fails.
        """
        if group is None:
            raise InvalidArgumentError("group", message="Group is required")
        require_id("group", group.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                await self.repository_factory(s).update(group)
        except SQLAlchemyError as e:
            logger.error("Failed to update group", group_id=group.id, error=str(e))
            raise UpdateFailedError("group", group.id, cause=e) from e

    async def delete(
        self,
        group_id: str,
        session: AsyncSession | None = None,
        cascade: bool = False,
    ) -> None:
        """Delete a group.

        Args:
            group_id: ID of the group.
            session: Caller's session, if any.
            cascade: Also delete the group's collections and their coins.
                Without it those rows are left in place.

        Raises:
            DeleteFailedError: If the row is missing or a delete fails.
        """
        require_id("group", group_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                if cascade:
                    await self.collection_service.delete_by_group(group_id, session=s)
                await self.repository_factory(s).delete(group_id)
        except (SQLAlchemyError, StorageError) as e:
            logger.error("Failed to delete group", group_id=group_id, error=str(e))
            raise DeleteFailedError("group", group_id, cause=e) from e

    async def get_all_by_user(
        self, user_id: str, session: AsyncSession | None = None
    ) -> list[Group]:
        """Load every group of a user with its collections.

        Raises:
            GetAllFailedError: If the groups or the collections cannot be read.
        """
        require_id("user", user_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                groups = await self.repository_factory(s).get_all_by_user(user_id)
                collections = await self.collection_service.get_all(session=s)
        except (SQLAlchemyError, GetAllFailedError) as e:
            logger.error("Failed to load groups", user_id=user_id, error=str(e))
            raise GetAllFailedError("group", cause=e) from e

        by_id = {group.id: group for group in groups}
        for collection in collections:
            group = by_id.get(collection.group_id)
            if group is not None:
                group.add_collection(collection)
        return groups
