"""Bookmark model."""

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class Bookmark(Base, TimestampMixin):
    """A saved link owned by exactly one user."""

    __tablename__ = "bookmarks"
    __table_args__ = (UniqueConstraint("user_id", "link", name="uq_bookmarks_user_link"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    description = Column(String, nullable=True)
    link = Column(String(2048), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="bookmarks")
