"""Bookmark API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from src.api.dependencies import get_bookmark_service, get_current_user
from src.models.user import User
from src.schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from src.services.bookmark_service import BookmarkService
from src.services.patch import patch_from_model

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# Ids are 64-bit integer primary keys
BookmarkId = Annotated[int, Path(ge=1, le=2**63 - 1)]


@router.get("", response_model=list[BookmarkResponse])
async def get_bookmarks(
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get all bookmarks of the current user."""
    return bookmark_service.list_bookmarks(current_user.id)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    bookmark_data: BookmarkCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Create a new bookmark."""
    return bookmark_service.create_bookmark(
        current_user.id,
        title=bookmark_data.title,
        link=bookmark_data.link,
        description=bookmark_data.description,
    )


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: BookmarkId,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Get a specific bookmark."""
    return bookmark_service.get_bookmark(current_user.id, bookmark_id)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def edit_bookmark(
    bookmark_id: BookmarkId,
    bookmark_data: BookmarkUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Update a bookmark."""
    return bookmark_service.edit_bookmark(
        current_user.id, bookmark_id, patch_from_model(bookmark_data)
    )


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_bookmark(
    bookmark_id: BookmarkId,
    current_user: Annotated[User, Depends(get_current_user)],
    bookmark_service: Annotated[BookmarkService, Depends(get_bookmark_service)],
):
    """Delete a bookmark."""
    bookmark_service.delete_bookmark(current_user.id, bookmark_id)
