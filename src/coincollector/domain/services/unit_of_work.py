"""Transaction scope shared by the storage services.

Every storage operation accepts an optional ``session``. Without one the
operation runs self-managed: it opens its own session, begins a
transaction, commits when the work succeeds, rolls back on the first error
and closes the session. With one it runs caller-managed: statements are
executed on the caller's session and its transaction state is left alone.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from enum import Enum

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from coincollector.domain.exceptions import EntityType, InvalidArgumentError


class SaveOutcome(str, Enum):
    """Result of an insert that tolerates an existing row."""

    INSERTED = "inserted"
    ALREADY_EXISTED = "already_existed"


@asynccontextmanager
async def unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
    session: AsyncSession | None = None,
) -> AsyncIterator[AsyncSession]:
    """Yield the session a storage operation runs in.

    Args:
        session_factory: Factory used to open a session in self-managed mode.
        session: Caller's session. When given it is yielded as is and never
            begun, committed, rolled back or closed here.

    Yields:
        The session to execute statements on.
    """
    if session is not None:
        yield session
        return

    async with session_factory() as own_session:
        async with own_session.begin():
            yield own_session


def require_id(entity_type: EntityType, entity_id: str | None) -> str:
    """Reject a missing or blank id before any I/O happens.

    Raises:
        InvalidArgumentError: If the id is None or blank.
    """
    if entity_id is None or not str(entity_id).strip():
        raise InvalidArgumentError(entity_type, message=f"{entity_type.capitalize()} ID is required")
    return entity_id
