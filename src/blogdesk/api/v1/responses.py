"""Response envelope helpers and service-error to HTTP mapping."""
from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, status

from blogdesk.schemas.common import ApiResponse
from blogdesk.services.errors import ErrorKind, ServiceError

DataT = TypeVar("DataT")

_ERROR_MAP: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.VALIDATION: (status.HTTP_400_BAD_REQUEST, "Validation failed"),
    ErrorKind.NOTHING_TO_UPDATE: (status.HTTP_400_BAD_REQUEST, "No fields to update"),
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource not found"),
    ErrorKind.CONFLICT: (status.HTTP_409_CONFLICT, "Resource already exists"),
    ErrorKind.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Invalid credentials or inactive account",
    ),
    ErrorKind.ACCOUNT_INACTIVE: (
        status.HTTP_403_FORBIDDEN,
        "Invalid credentials or inactive account",
    ),
    ErrorKind.UNAUTHORIZED: (status.HTTP_401_UNAUTHORIZED, "Authentication required"),
}


def success(message: str, data: DataT | None = None) -> ApiResponse[DataT]:
    """Wrap ``data`` in the success envelope."""
    return ApiResponse(success=True, message=message, data=data)


def http_error(exc: ServiceError, message: str | None = None) -> HTTPException:
    """Build the HTTPException matching a service error's kind.

    Args:
        exc: The service failure being reported.
        message: Optional override for the envelope's ``message`` field.
    """
    status_code, default_message = _ERROR_MAP[exc.kind]
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return HTTPException(
        status_code=status_code,
        detail={"message": message or default_message, "error": str(exc)},
        headers=headers,
    )
