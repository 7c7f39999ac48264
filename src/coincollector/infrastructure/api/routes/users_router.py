"""Router for user registration and lookup."""

from fastapi import APIRouter, HTTPException, status

from coincollector.core.logging import get_logger
from coincollector.domain.entities import User
from coincollector.domain.exceptions import InvalidArgumentError
from coincollector.infrastructure.api.dependencies import CurrentUser, UserService
from coincollector.infrastructure.api.schemas import UserCreate, UserLogin, UserResponse

router = APIRouter(tags=["Users"])
logger = get_logger(__name__)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
async def register_user(user_data: UserCreate, user_service: UserService) -> User:
    """Register a new user. The returned id is sent in the user id header afterwards."""
    return await user_service.save(User.create(user_data.username))


@router.post("/login", response_model=UserResponse, summary="Look up a user by username")
async def login(login_data: UserLogin, user_service: UserService) -> User:
    """Return the registered user so the client can send its id in the user id header.

    There are no passwords; an unknown username is answered with 404.
    """
    try:
        user = await user_service.get_by_username(login_data.username)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info("User logged in", user_id=user.id)
    return user


@router.get("/me", response_model=UserResponse, summary="Get the calling user")
async def get_me(current_user: CurrentUser) -> User:
    return current_user
