"""Storage service for users."""

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coincollector.core.logging import get_logger
from coincollector.domain.entities import User
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    DeleteFailedError,
    InvalidArgumentError,
    NotFoundError,
    SaveFailedError,
    UpdateFailedError,
)
from coincollector.domain.services.unit_of_work import require_id, unit_of_work
from coincollector.infrastructure.persistence.repositories import UserRepository

logger = get_logger(__name__)


class UserStorageService:
    """Persist and load users."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        repository_factory: Callable[[AsyncSession], UserRepository] = UserRepository,
    ) -> None:
        self.session_factory = session_factory
        self.repository_factory = repository_factory

    async def save(self, user: User, session: AsyncSession | None = None) -> User:
        """Register a new user.

        Raises:
            InvalidArgumentError: If user is None.
            AlreadyExistsError: If the id or the username is taken.
            SaveFailedError: If the insert fails.
        """
        if user is None:
            raise InvalidArgumentError("user", message="User is required")
        require_id("user", user.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                repository = self.repository_factory(s)
                if await repository.exists(user.id):
                    raise AlreadyExistsError("user", user.id)
                if await repository.get_by_username(user.username) is not None:
                    raise AlreadyExistsError(
                        "user", user.id, message=f"Username {user.username} is already taken"
                    )
                await repository.create(user)
        except IntegrityError as e:
            logger.warning("Concurrent user insert", user_id=user.id, error=str(e))
            raise AlreadyExistsError("user", user.id, cause=e) from e
        except SQLAlchemyError as e:
            logger.error("Failed to save user", user_id=user.id, error=str(e))
            raise SaveFailedError("user", user.id, cause=e) from e

        logger.info("User registered", user_id=user.id, username=user.username)
        return user

    async def get_by_id(self, user_id: str, session: AsyncSession | None = None) -> User:
        """Load a user.

        Raises:
            NotFoundError: If the user does not exist or cannot be read.
        """
        require_id("user", user_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                user = await self.repository_factory(s).read(user_id)
        except SQLAlchemyError as e:
            logger.warning("Failed to read user", user_id=user_id, error=str(e))
            raise NotFoundError("user", user_id, cause=e) from e

        if user is None:
            raise NotFoundError("user", user_id)
        return user

    async def get_by_username(self, username: str, session: AsyncSession | None = None) -> User:
        """Load a user by username.

        Raises:
            InvalidArgumentError: If username is blank.
            NotFoundError: If no user has this username or the read fails.
        """
        if not username or not username.strip():
            raise InvalidArgumentError("user", message="Username is required")
        try:
            async with unit_of_work(self.session_factory, session) as s:
                user = await self.repository_factory(s).get_by_username(username.strip())
        except SQLAlchemyError as e:
            logger.warning("Failed to read user", username=username, error=str(e))
            raise NotFoundError("user", cause=e, message=f"User {username} not found") from e

        if user is None:
            raise NotFoundError("user", message=f"User {username} not found")
        return user

    async def update(self, user: User, session: AsyncSession | None = None) -> None:
        if user is None:
            raise InvalidArgumentError("user", message="User is required")
        require_id("user", user.id)

        try:
            async with unit_of_work(self.session_factory, session) as s:
                await self.repository_factory(s).update(user)
        except SQLAlchemyError as e:
            logger.error("Failed to update user", user_id=user.id, error=str(e))
            raise UpdateFailedError("user", user.id, cause=e) from e

    async def delete(self, user_id: str, session: AsyncSession | None = None) -> None:
        require_id("user", user_id)
        try:
            async with unit_of_work(self.session_factory, session) as s:
                await self.repository_factory(s).delete(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to delete user", user_id=user_id, error=str(e))
            raise DeleteFailedError("user", user_id, cause=e) from e
