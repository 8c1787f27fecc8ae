"""User profile service."""

import logging

from sqlalchemy.orm import Session

from src.models.user import User
from src.services.exceptions import NotFound
from src.services.patch import Patch, apply_patch

logger = logging.getLogger(__name__)

PROFILE_FIELDS = frozenset({"first_name", "last_name"})


class UserService:
    """Reads and edits the caller's own profile."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def edit_profile(self, user_id: int, patch: Patch) -> User:
        """Apply the given subset of profile fields."""
        user = self.get(user_id)
        changed = apply_patch(user, patch, PROFILE_FIELDS)
        if changed:
            self.db.commit()
            self.db.refresh(user)
            logger.info(f"Updated profile of user {user_id}: {', '.join(changed)}")
        return user
