# src/blogdesk/services/__init__.py
"""Business logic services for the blogdesk application."""

from .author_service import AuthorService
from .errors import (
    AccountInactiveError,
    ConflictError,
    ErrorKind,
    InvalidCredentialsError,
    NotFoundError,
    NothingToUpdateError,
    ServiceError,
    UnauthorizedError,
    ValidationFailedError,
)
from .post_service import PostService

__all__ = [
    "AuthorService",
    "PostService",
    "ErrorKind",
    "ServiceError",
    "AccountInactiveError",
    "ConflictError",
    "InvalidCredentialsError",
    "NotFoundError",
    "NothingToUpdateError",
    "UnauthorizedError",
    "ValidationFailedError",
]
