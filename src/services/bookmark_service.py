"""Service layer for owner-scoped bookmark CRUD."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.database import is_unique_violation
from src.models.bookmark import Bookmark
from src.services.exceptions import DuplicateResource, Forbidden, NotFound
from src.services.patch import Patch, apply_patch

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"title", "description", "link"})


class BookmarkService:
    """Bookmark operations, always scoped to the calling user.

    With ``mask_foreign_resources`` set, a bookmark owned by someone else is
    reported as missing so callers cannot probe for other users' ids.
    Otherwise it is reported as forbidden. Either way the rule is the same for
    get, edit and delete.
    """

    def __init__(self, db: Session, mask_foreign_resources: bool = True):
        self.db = db
        self.mask_foreign_resources = mask_foreign_resources

    def list_bookmarks(self, owner_id: int) -> list[Bookmark]:
        """Get all bookmarks of a user, oldest first."""
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.user_id == owner_id)
            .order_by(Bookmark.created_at, Bookmark.id)
            .all()
        )

    def create_bookmark(
        self,
        owner_id: int,
        title: str,
        link: str,
        description: str | None = None,
    ) -> Bookmark:
        bookmark = Bookmark(user_id=owner_id, title=title, link=link, description=description)
        self.db.add(bookmark)
        self._commit()
        self.db.refresh(bookmark)
        return bookmark

    def get_bookmark(self, owner_id: int, bookmark_id: int) -> Bookmark:
        return self._get_owned_bookmark(owner_id, bookmark_id)

    def edit_bookmark(self, owner_id: int, bookmark_id: int, patch: Patch) -> Bookmark:
        """Apply only the fields present in the patch."""
        bookmark = self._get_owned_bookmark(owner_id, bookmark_id)
        if apply_patch(bookmark, patch, EDITABLE_FIELDS):
            self._commit()
            self.db.refresh(bookmark)
        return bookmark

    def delete_bookmark(self, owner_id: int, bookmark_id: int) -> None:
        bookmark = self._get_owned_bookmark(owner_id, bookmark_id)
        self.db.delete(bookmark)
        self.db.commit()

    def _get_owned_bookmark(self, owner_id: int, bookmark_id: int) -> Bookmark:
        """Look up a bookmark by id and check it belongs to the caller."""
        bookmark = self.db.get(Bookmark, bookmark_id)
        if bookmark is None:
            raise NotFound()

        if bookmark.user_id != owner_id:
            logger.warning(f"User {owner_id} tried to access bookmark {bookmark_id}")
            if self.mask_foreign_resources:
                raise NotFound()
            raise Forbidden()

        return bookmark

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_unique_violation(e):
                raise DuplicateResource() from e
            raise
