"""Router for coin groups of the calling user."""

from fastapi import APIRouter, Response, status

from coincollector.core.logging import get_logger
from coincollector.domain.entities import Group
from coincollector.infrastructure.api.dependencies import CurrentUser, GroupService, Ownership
from coincollector.infrastructure.api.schemas import GroupCreate, GroupResponse, GroupUpdate

router = APIRouter(tags=["Groups"])
logger = get_logger(__name__)


@router.get("", response_model=list[GroupResponse], summary="List groups")
async def list_groups(current_user: CurrentUser, group_service: GroupService) -> list[GroupResponse]:
    """List the caller's groups with their collections and coins."""
    groups = await group_service.get_all_by_user(current_user.id)
    return [GroupResponse.from_entity(group) for group in groups]


@router.post(
    "",
    response_model=GroupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new group",
)
async def create_group(
    group_data: GroupCreate,
    current_user: CurrentUser,
    group_service: GroupService,
) -> GroupResponse:
    group = Group.create(name=group_data.name, owner_id=current_user.id)
    await group_service.save(group)
    return GroupResponse.from_entity(group)


@router.get("/{group_id}", response_model=GroupResponse, summary="Get a group")
async def get_group(group_id: str, current_user: CurrentUser, ownership: Ownership) -> GroupResponse:
    group = await ownership.require_group_owner(current_user.id, group_id)
    return GroupResponse.from_entity(group)


@router.patch("/{group_id}", response_model=GroupResponse, summary="Rename a group")
async def update_group(
    group_id: str,
    group_data: GroupUpdate,
    current_user: CurrentUser,
    group_service: GroupService,
    ownership: Ownership,
) -> GroupResponse:
    group = await ownership.require_group_owner(current_user.id, group_id)
    group.name = group_data.name
    await group_service.update_metadata(group)
    logger.info("Group renamed", group_id=group_id, user_id=current_user.id)
    return GroupResponse.from_entity(group)


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a group with its collections and coins",
)
async def delete_group(
    group_id: str,
    current_user: CurrentUser,
    group_service: GroupService,
    ownership: Ownership,
) -> Response:
    await ownership.require_group_owner(current_user.id, group_id)
    await group_service.delete(group_id, cascade=True)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
