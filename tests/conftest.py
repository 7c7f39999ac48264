"""Pytest configuration for all tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from coincollector.domain.entities import Coin, CoinCountry, CoinValue, Collection, Group, Mint, User
from coincollector.domain.services import (
    CoinStorageService,
    CollectionStorageService,
    GroupStorageService,
    OwnershipService,
    UserStorageService,
)
from coincollector.infrastructure.persistence import models  # noqa: F401
from coincollector.infrastructure.persistence.database import Base, create_session_factory


async def create_test_engine() -> AsyncEngine:
    """Create an in-memory SQLite engine with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine


@pytest.fixture
def make_engine():
    """Factory for additional independent databases; the caller disposes them."""
    return create_test_engine


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = await create_test_engine()
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session for repository tests; rolled back afterwards."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def coin_service(session_factory) -> CoinStorageService:
    return CoinStorageService(session_factory)


@pytest.fixture
def collection_service(session_factory, coin_service) -> CollectionStorageService:
    return CollectionStorageService(session_factory, coin_service=coin_service)


@pytest.fixture
def group_service(session_factory, collection_service) -> GroupStorageService:
    return GroupStorageService(session_factory, collection_service=collection_service)


@pytest.fixture
def user_service(session_factory) -> UserStorageService:
    return UserStorageService(session_factory)


@pytest.fixture
def ownership_service(group_service, collection_service, coin_service) -> OwnershipService:
    return OwnershipService(group_service, collection_service, coin_service)


@pytest.fixture
def make_coin():
    """Factory for coins; defaults to a German 1 Euro coin from 2002, mint A."""

    def _make_coin(collection_id: str, **overrides) -> Coin:
        fields = {
            "year": 2002,
            "value": CoinValue.ONE_EURO,
            "mint_country": CoinCountry.GERMANY,
            "mint": Mint.BERLIN,
        }
        fields.update(overrides)
        return Coin.create(collection_id=collection_id, **fields)

    return _make_coin


@pytest.fixture
def group() -> Group:
    return Group.create(name="TestGroup", owner_id="u1")


@pytest.fixture
def collection(group: Group) -> Collection:
    return Collection.create(name="C1", group_id=group.id)


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden session factory dependency."""
    from coincollector.infrastructure.api.app import app
    from coincollector.infrastructure.persistence.database import get_session_factory

    app.dependency_overrides[get_session_factory] = lambda: session_factory

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def registered_user(user_service: UserStorageService) -> User:
    return await user_service.save(User.create("alice"))


@pytest.fixture
def auth_headers(registered_user: User) -> dict[str, str]:
    return {"X-User-Id": registered_user.id}
