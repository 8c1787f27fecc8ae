"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service
from src.schemas.auth import AccessToken, AuthCredentials
from src.schemas.user import UserResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    return auth_service.signup(credentials.email, credentials.password)


@router.post("/signin", response_model=AccessToken)
async def signin(
    credentials: AuthCredentials,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Sign in with email and password."""
    return auth_service.signin(credentials.email, credentials.password)
