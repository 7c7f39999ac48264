"""Unit tests for CollectionRepository against an in-memory database."""
import pytest
from sqlalchemy.exc import NoResultFound

from coincollector.domain.entities import Collection
from coincollector.infrastructure.persistence.repositories import CollectionRepository


@pytest.fixture
def repository(db_session):
    return CollectionRepository(db_session)


@pytest.mark.asyncio
async def test_create_ignores_coins(repository, make_coin):
    collection = Collection.create(name="Spain", group_id="grp-1")
    collection.add_coin(make_coin(collection.id))

    await repository.create(collection)
    loaded = await repository.read(collection.id)

    assert loaded.name == "Spain"
    assert loaded.group_id == "grp-1"
    assert loaded.coins == []


@pytest.mark.asyncio
async def test_update_moves_to_other_group(repository):
    collection = await repository.create(Collection.create(name="Spain", group_id="grp-1"))

    collection.name = "Spain 2002"
    collection.move_to_group("grp-2")
    await repository.update(collection)

    loaded = await repository.read(collection.id)
    assert loaded.name == "Spain 2002"
    assert loaded.group_id == "grp-2"


@pytest.mark.asyncio
async def test_update_missing_row(repository):
    with pytest.raises(NoResultFound):
        await repository.update(Collection.create(name="Ghost", group_id="grp-1"))


@pytest.mark.asyncio
async def test_delete_and_exists(repository):
    collection = await repository.create(Collection.create(name="Spain", group_id="grp-1"))
    assert await repository.exists(collection.id) is True

    await repository.delete(collection.id)

    assert await repository.exists(collection.id) is False
    with pytest.raises(NoResultFound):
        await repository.delete(collection.id)


@pytest.mark.asyncio
async def test_get_all(repository):
    first = await repository.create(Collection.create(name="A", group_id="grp-1"))
    second = await repository.create(Collection.create(name="B", group_id="grp-2"))

    collections = await repository.get_all()

    assert {c.id for c in collections} == {first.id, second.id}
