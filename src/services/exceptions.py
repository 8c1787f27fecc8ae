"""Exceptions raised by the service layer.

Each carries the HTTP status it maps to; the handler registered in
``src.main`` turns them into ``{"detail": ...}`` responses.
"""

from fastapi import status


class ServiceError(Exception):
    """Base class for errors surfaced directly to the client."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_detail: str = "Bad request"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidCredentials(ServiceError):
    """Raised on signin failure. Does not say whether email or password was wrong."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Credentials incorrect"


class DuplicateCredentials(ServiceError):
    """Raised when signing up with an email that is already registered."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Credentials taken"


class DuplicateResource(ServiceError):
    """Raised when a write would violate a unique constraint on a resource."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Bookmark already exists"


class NotFound(ServiceError):
    """Raised when a resource does not exist (or is hidden from the caller)."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Bookmark not found"


class Forbidden(ServiceError):
    """Raised when a resource exists but belongs to another user."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Access denied to bookmark"
