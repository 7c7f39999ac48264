"""Router for coin collections."""

from fastapi import APIRouter, Response, status

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Collection
from coincollector.infrastructure.api.dependencies import (
    CollectionService,
    CurrentUser,
    Ownership,
)
from coincollector.infrastructure.api.schemas import (
    CollectionCreate,
    CollectionResponse,
    CollectionUpdate,
)

router = APIRouter(tags=["Collections"])
logger = get_logger(__name__)


@router.post(
    "",
    response_model=CollectionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a collection in one of the caller's groups",
)
async def create_collection(
    collection_data: CollectionCreate,
    current_user: CurrentUser,
    collection_service: CollectionService,
    ownership: Ownership,
) -> CollectionResponse:
    await ownership.require_group_owner(current_user.id, collection_data.group_id)
    collection = Collection.create(name=collection_data.name, group_id=collection_data.group_id)
    await collection_service.save(collection)
    return CollectionResponse.from_entity(collection)


@router.get("/{collection_id}", response_model=CollectionResponse, summary="Get a collection")
async def get_collection(
    collection_id: str, current_user: CurrentUser, ownership: Ownership
) -> CollectionResponse:
    collection = await ownership.require_collection_owner(current_user.id, collection_id)
    return CollectionResponse.from_entity(collection)


@router.patch(
    "/{collection_id}",
    response_model=CollectionResponse,
    summary="Rename a collection or move it to another group",
)
async def update_collection(
    collection_id: str,
    collection_data: CollectionUpdate,
    current_user: CurrentUser,
    collection_service: CollectionService,
    ownership: Ownership,
) -> CollectionResponse:
    collection = await ownership.require_collection_owner(current_user.id, collection_id)

    if collection_data.group_id is not None and collection_data.group_id != collection.group_id:
        # The target group must belong to the caller as well
        await ownership.require_group_owner(current_user.id, collection_data.group_id)
        collection.move_to_group(collection_data.group_id)
    if collection_data.name is not None:
        collection.name = collection_data.name

    await collection_service.update_metadata(collection)
    return CollectionResponse.from_entity(collection)


@router.delete(
    "/{collection_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a collection with its coins",
)
async def delete_collection(
    collection_id: str,
    current_user: CurrentUser,
    collection_service: CollectionService,
    ownership: Ownership,
) -> Response:
    await ownership.require_collection_owner(current_user.id, collection_id)
    await collection_service.delete(collection_id, cascade=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
