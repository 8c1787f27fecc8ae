"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_user, get_user_service
from src.models.user import User
from src.schemas.user import UserResponse, UserUpdate
from src.services.patch import patch_from_model
from src.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user


@router.patch("", response_model=UserResponse)
async def edit_user(
    user_data: UserUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's profile."""
    return user_service.edit_profile(current_user.id, patch_from_model(user_data))
