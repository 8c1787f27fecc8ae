"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AccessToken, AuthCredentials
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.schemas.user import UserResponse, UserUpdate

__all__ = [
    "AuthCredentials",
    "AccessToken",
    "UserResponse",
    "UserUpdate",
    "BookmarkCreate",
    "BookmarkUpdate",
    "BookmarkResponse",
]
