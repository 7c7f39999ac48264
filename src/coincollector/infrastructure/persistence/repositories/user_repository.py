"""User repository for database operations."""

from sqlalchemy import delete, select, update
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from coincollector.core.logging import get_logger
from coincollector.domain.entities import User
from coincollector.infrastructure.persistence.models import UserModel

logger = get_logger(__name__)


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, user: User) -> User:
        self.session.add(UserModel(id=user.id, username=user.username))
        await self.session.flush()
        logger.info("User created", user_id=user.id)
        return user

    async def read(self, user_id: str) -> User | None:
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        model = result.scalar_one_or_none()
        return User(id=model.id, username=model.username) if model is not None else None

    async def get_by_username(self, username: str) -> User | None:
        result = await self.session.execute(
            select(UserModel).where(UserModel.username == username)
        )
        model = result.scalar_one_or_none()
        return User(id=model.id, username=model.username) if model is not None else None

    async def update(self, user: User) -> None:
        """Rename a user.

        Raises:
            NoResultFound: If no row with the user's id exists.
        """
        result = await self.session.execute(
            update(UserModel).where(UserModel.id == user.id).values(username=user.username)
        )
        if result.rowcount != 1:
            raise NoResultFound(f"User update affected {result.rowcount} rows: {user.id}")
        logger.info("User updated", user_id=user.id)

    async def delete(self, user_id: str) -> None:
        result = await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        if result.rowcount != 1:
            raise NoResultFound(f"User delete affected {result.rowcount} rows: {user_id}")
        logger.info("User deleted", user_id=user_id)

    async def exists(self, user_id: str) -> bool:
        result = await self.session.execute(select(UserModel.id).where(UserModel.id == user_id))
        return result.scalar_one_or_none() is not None

    async def get_all(self) -> list[User]:
        result = await self.session.execute(select(UserModel))
        return [User(id=model.id, username=model.username) for model in result.scalars().all()]
