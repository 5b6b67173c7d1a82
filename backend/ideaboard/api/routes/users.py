"""User Routes: listing, login and registration.

Invariants:
    - Bodies validated as UserCredentials before the handler runs
    - Responses go through UserResponse; token omitted when unset
"""

from fastapi import APIRouter, Depends, status

from ideaboard.api.dependencies import get_user_service
from ideaboard.schemas.user import UserCredentials, UserResponse
from ideaboard.services.user_service import UserService

router = APIRouter(tags=["users"])


@router.get(
    "/api/users",
    response_model=list[UserResponse],
    response_model_exclude_none=True,
)
async def show_all_users(service: UserService = Depends(get_user_service)):
    """List every user, without tokens."""
    return await service.show_all()


@router.post(
    "/login",
    response_model=UserResponse,
    response_model_exclude_none=True,
)
async def login(
    body: UserCredentials, service: UserService = Depends(get_user_service),
):
    """Check credentials and return the user with a fresh token."""
    return await service.login(body)


@router.post(
    "/register",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: UserCredentials, service: UserService = Depends(get_user_service),
):
    """Create a user and return it with a token."""
    return await service.register(body)
