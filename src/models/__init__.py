"""SQLAlchemy models."""

from src.models.bookmark import Bookmark
from src.models.user import User

__all__ = [
    "User",
    "Bookmark",
]
