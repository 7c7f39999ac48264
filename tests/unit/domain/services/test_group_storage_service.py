"""Unit tests for GroupStorageService with mocked collaborators."""
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from coincollector.domain.entities import Collection, Group
from coincollector.domain.exceptions import (
    AlreadyExistsError,
    DeleteFailedError,
    GetAllFailedError,
    GetByIdFailedError,
    InvalidArgumentError,
    NotFoundError,
    SaveFailedError,
    UpdateFailedError,
)
from coincollector.domain.services import CollectionStorageService, GroupStorageService, SaveOutcome
from coincollector.infrastructure.persistence.repositories import CollectionRepository, GroupRepository


def db_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("disk I/O error"))


@pytest.fixture
def repository():
    repo = AsyncMock(spec=GroupRepository)
    repo.read.return_value = None
    return repo


@pytest.fixture
def collections():
    service = AsyncMock(spec=CollectionStorageService)
    service.insert_if_absent.return_value = SaveOutcome.INSERTED
    service.get_all.return_value = []
    return service


@pytest.fixture
def service(session_factory, repository, collections):
    return GroupStorageService(
        session_factory,
        collection_service=collections,
        repository_factory=lambda session: repository,
    )


@pytest.fixture
def group_with_collections():
    group = Group.create(name="TestGroup", owner_id="u1")
    group.add_collection(Collection.create(name="C1", group_id=group.id))
    group.add_collection(Collection.create(name="C2", group_id=group.id))
    return group


@pytest.mark.asyncio
async def test_save_new_group(service, repository, collections, group_with_collections):
    outcome = await service.save(group_with_collections)

    assert outcome is SaveOutcome.INSERTED
    repository.create.assert_awaited_once_with(group_with_collections)
    assert collections.insert_if_absent.await_count == 2
    collections.update_metadata.assert_not_awaited()


@pytest.mark.asyncio
async def test_save_none(service):
    with pytest.raises(InvalidArgumentError):
        await service.save(None)


@pytest.mark.asyncio
async def test_save_falls_back_to_metadata_update(service, collections, group_with_collections):
    collections.insert_if_absent.side_effect = [SaveOutcome.ALREADY_EXISTED, SaveOutcome.INSERTED]

    await service.save(group_with_collections)

    collections.update_metadata.assert_awaited_once()
    assert collections.update_metadata.await_args.args == (group_with_collections.collections[0],)


@pytest.mark.asyncio
async def test_save_existing_group_of_same_owner(service, repository):
    group = Group.create(name="Renamed", owner_id="u1")
    repository.read.return_value = Group(id=group.id, name="TestGroup", owner_id="u1")

    outcome = await service.save(group)

    assert outcome is SaveOutcome.ALREADY_EXISTED
    repository.update.assert_awaited_once_with(group)
    repository.create.assert_not_awaited()


@pytest.mark.asyncio
async def test_save_existing_group_of_other_owner(service, repository, collections):
    group = Group.create(name="Mine", owner_id="u1")
    repository.read.return_value = Group(id=group.id, name="Theirs", owner_id="u2")

    with pytest.raises(AlreadyExistsError) as exc_info:
        await service.save(group)

    assert exc_info.value.entity_type == "group"
    repository.update.assert_not_awaited()
    collections.insert_if_absent.assert_not_awaited()


@pytest.mark.asyncio
async def test_save_primary_key_violation(service, repository, collections, group_with_collections):
    error = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
    repository.create.side_effect = error

    with pytest.raises(AlreadyExistsError) as exc_info:
        await service.save(group_with_collections)

    assert exc_info.value.entity_type == "group"
    assert exc_info.value.cause is error
    collections.insert_if_absent.assert_not_awaited()


@pytest.mark.asyncio
async def test_collection_failure_is_group_save_failure(service, collections, group_with_collections):
    child_error = SaveFailedError("collection", "col-1", cause=db_error())
    collections.insert_if_absent.side_effect = child_error

    with pytest.raises(SaveFailedError) as exc_info:
        await service.save(group_with_collections)

    assert exc_info.value.entity_type == "group"
    assert exc_info.value.cause is child_error


@pytest.mark.asyncio
async def test_collection_conflict_is_group_save_failure(service, collections, group_with_collections):
    collections.insert_if_absent.side_effect = AlreadyExistsError("collection", "col-1")

    with pytest.raises(SaveFailedError) as exc_info:
        await service.save(group_with_collections)

    assert exc_info.value.entity_type == "group"


@pytest.mark.asyncio
async def test_get_by_id_attaches_matching_collections(service, repository, collections):
    repository.read.return_value = Group(id="g1", name="TestGroup", owner_id="u1")
    mine = Collection(id="col-1", name="C1", group_id="g1")
    collections.get_all.return_value = [mine, Collection(id="col-2", name="C2", group_id="g2")]

    group = await service.get_by_id("g1")

    assert group.collections == [mine]


@pytest.mark.asyncio
async def test_get_by_id_missing(service):
    with pytest.raises(NotFoundError):
        await service.get_by_id("g1")


@pytest.mark.asyncio
async def test_get_by_id_collection_error(service, repository, collections):
    repository.read.return_value = Group(id="g1", name="TestGroup", owner_id="u1")
    collections.get_all.side_effect = GetAllFailedError("collection")

    with pytest.raises(GetByIdFailedError) as exc_info:
        await service.get_by_id("g1")

    assert exc_info.value.entity_type == "group"


@pytest.mark.asyncio
async def test_update_metadata(service, repository, collections, group_with_collections):
    await service.update_metadata(group_with_collections)

    repository.update.assert_awaited_once_with(group_with_collections)
    collections.update_metadata.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_metadata_none(service):
    with pytest.raises(InvalidArgumentError):
        await service.update_metadata(None)


@pytest.mark.asyncio
async def test_update_metadata_error(service, repository, group_with_collections):
    repository.update.side_effect = db_error()

    with pytest.raises(UpdateFailedError):
        await service.update_metadata(group_with_collections)


@pytest.mark.asyncio
async def test_delete_with_cascade(service, repository, collections):
    await service.delete("g1", cascade=True)

    collections.delete_by_group.assert_awaited_once()
    repository.delete.assert_awaited_once_with("g1")


@pytest.mark.asyncio
async def test_delete_error(service, repository, collections):
    repository.delete.side_effect = db_error()

    with pytest.raises(DeleteFailedError):
        await service.delete("g1")

    collections.delete_by_group.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_all_by_user(service, repository, collections):
    full = Group(id="g1", name="Full", owner_id="u1")
    empty = Group(id="g2", name="Empty", owner_id="u1")
    repository.get_all_by_user.return_value = [full, empty]
    mine = Collection(id="col-1", name="C1", group_id="g1")
    collections.get_all.return_value = [mine, Collection(id="col-9", name="X", group_id="g9")]

    groups = await service.get_all_by_user("u1")

    assert groups == [full, empty]
    assert full.collections == [mine]
    assert empty.collections == []


@pytest.mark.asyncio
async def test_get_all_by_user_error(service, repository):
    repository.get_all_by_user.side_effect = db_error()

    with pytest.raises(GetAllFailedError) as exc_info:
        await service.get_all_by_user("u1")

    assert exc_info.value.entity_type == "group"


class UnawareCollectionRepository(CollectionRepository):
    """Collection repository that misses rows written by a concurrent save."""

    async def exists(self, collection_id):
        return False


@pytest.mark.asyncio
async def test_concurrent_collection_insert_fails_group_save(
    session_factory, collection_service, group_service
):
    group = Group.create(name="TestGroup", owner_id="u1")
    collection = Collection.create(name="C1", group_id=group.id)
    await collection_service.save(collection)
    group.add_collection(collection)
    unaware = GroupStorageService(
        session_factory,
        collection_service=CollectionStorageService(
            session_factory, repository_factory=UnawareCollectionRepository
        ),
    )

    with pytest.raises(SaveFailedError) as exc_info:
        await unaware.save(group)

    assert exc_info.value.entity_type == "group"
    assert isinstance(exc_info.value.cause, AlreadyExistsError)
    assert exc_info.value.cause.entity_type == "collection"
    with pytest.raises(NotFoundError):
        await group_service.get_by_id(group.id)
