"""Bookmark schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookmarkCreate(BaseModel):
    """Create a new bookmark."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    link: str = Field(..., min_length=1, max_length=2048)


class BookmarkUpdate(BaseModel):
    """Update a bookmark. Only the fields sent are changed."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    link: str | None = Field(None, min_length=1, max_length=2048)

    @field_validator("title", "description", "link")
    @classmethod
    def reject_explicit_null(cls, value: str | None) -> str:
        """Omitting a field leaves it unchanged; sending null is an error."""
        if value is None:
            raise ValueError("must not be null")
        return value


class BookmarkResponse(BaseModel):
    """Bookmark response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    link: str
    created_at: datetime
    updated_at: datetime
