"""Repository for group database operations."""

from sqlalchemy import delete, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Group
from coincollector.infrastructure.persistence.models import GroupModel

logger = get_logger(__name__)


def group_from_model(model: GroupModel) -> Group | None:
    try:
        return Group(id=model.id, name=model.name, owner_id=model.owner_id)
    except ValueError as e:
        logger.warning("Invalid group row", group_id=model.id, error=str(e))
        return None


def _valid(models) -> list[Group]:
    return [group for group in map(group_from_model, models) if group is not None]


class GroupRepository:
    """Repository for group database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, group: Group) -> Group:
        """Insert the group row (without its collections)."""
        self.session.add(GroupModel(id=group.id, name=group.name, owner_id=group.owner_id))
        await self.session.flush()
        logger.info("Group created", group_id=group.id, owner_id=group.owner_id)
        return group

    async def read(self, group_id: str) -> Group | None:
        result = await self.session.execute(select(GroupModel).where(GroupModel.id == group_id))
        model = result.scalar_one_or_none()
        if model is None:
            logger.debug("Group not found", group_id=group_id)
            return None
        return group_from_model(model)

    async def update(self, group: Group) -> None:
        """Update the group name. The owner never changes.

        Raises:
            NoResultFound: If no row with the group's id exists.
        """
        result = await self.session.execute(
            update(GroupModel).where(GroupModel.id == group.id).values(name=group.name)
        )
        if result.rowcount != 1:
            raise NoResultFound(f"Group update affected {result.rowcount} rows: {group.id}")
        logger.info("Group updated", group_id=group.id)

    async def delete(self, group_id: str) -> None:
        """Delete the group row.

        Raises:
            NoResultFound: If no row with this id exists.
        """
        result = await self.session.execute(delete(GroupModel).where(GroupModel.id == group_id))
        if result.rowcount != 1:
            raise NoResultFound(f"Group delete affected {result.rowcount} rows: {group_id}")
        logger.info("Group deleted", group_id=group_id)

    async def exists(self, group_id: str) -> bool:
        result = await self.session.execute(select(GroupModel.id).where(GroupModel.id == group_id))
        return result.scalar_one_or_none() is not None

    async def get_all(self) -> list[Group]:
        result = await self.session.execute(select(GroupModel))
        return _valid(result.scalars().all())

    async def get_all_by_user(self, owner_id: str) -> list[Group]:
        """Get every group owned by a user."""
        result = await self.session.execute(select(GroupModel).where(GroupModel.owner_id == owner_id))
        groups = _valid(result.scalars().all())
        logger.debug("Groups read", owner_id=owner_id, count=len(groups))
        return groups
