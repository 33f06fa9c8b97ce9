"""Exceptions raised by the service layer.

Each exception carries an :class:`ErrorKind` so the HTTP layer can map it to a
status code by kind rather than by message text.
"""
from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from blogdesk.validation.result import Failure, FailureKind


class ErrorKind(StrEnum):
    """Closed set of service failure categories."""

    VALIDATION = "validation"
    NOTHING_TO_UPDATE = "nothing_to_update"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_CREDENTIALS = "invalid_credentials"
    ACCOUNT_INACTIVE = "account_inactive"
    UNAUTHORIZED = "unauthorized"


class ServiceError(RuntimeError):
    """Base exception for expected, user-facing service failures."""

    kind: ClassVar[ErrorKind]


class ValidationFailedError(ServiceError):
    """Raised when a request payload violates a field rule."""

    kind = ErrorKind.VALIDATION


class NothingToUpdateError(ServiceError):
    """Raised when a partial update carries no fields."""

    kind = ErrorKind.NOTHING_TO_UPDATE


class NotFoundError(ServiceError):
    """Raised when the addressed post or author does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(ServiceError):
    """Raised when a uniqueness constraint (username, email, slug) would break."""

    kind = ErrorKind.CONFLICT


class InvalidCredentialsError(ServiceError):
    """Raised when a login identifier or password does not match."""

    kind = ErrorKind.INVALID_CREDENTIALS


class AccountInactiveError(ServiceError):
    """Raised when an inactive account attempts to log in."""

    kind = ErrorKind.ACCOUNT_INACTIVE


class UnauthorizedError(ServiceError):
    """Raised when a bearer token is missing, invalid or stale."""

    kind = ErrorKind.UNAUTHORIZED


def error_for_failure(failure: Failure) -> ServiceError:
    """Return the service exception matching a core failure value."""
    if failure.kind is FailureKind.NO_FIELDS_TO_UPDATE:
        return NothingToUpdateError(failure.message)
    return ValidationFailedError(failure.message)
