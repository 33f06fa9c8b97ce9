# src/blogdesk/api/v1/endpoints/authors.py
"""Author listing and self-service profile endpoints."""

from typing import Any

from fastapi import APIRouter, Query

from blogdesk.schemas.author import AuthorListResponse, AuthorResponse, AuthorUpdateRequest
from blogdesk.schemas.common import ApiResponse
from blogdesk.services import ServiceError

from ..dependencies import AuthorServiceDep, CurrentAuthorDep
from ..responses import http_error, success

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", response_model=ApiResponse[AuthorListResponse])
def list_authors(
    authors: AuthorServiceDep,
    limit: str | None = Query(None, description="Maximum number of authors (1-100)"),
    offset: str | None = Query(None, description="Number of authors to skip"),
) -> ApiResponse[AuthorListResponse]:
    """List active authors, newest first; bad window values fall back to defaults."""
    return success("Authors retrieved successfully", authors.list_authors(limit, offset))


@router.get("/me", response_model=ApiResponse[AuthorResponse])
def get_my_profile(current_author: CurrentAuthorDep) -> ApiResponse[AuthorResponse]:
    """Return the caller's own profile."""
    return success("Profile retrieved successfully", AuthorResponse.model_validate(current_author))


@router.put("/me", response_model=ApiResponse[AuthorResponse])
def update_my_profile(
    payload: AuthorUpdateRequest,
    current_author: CurrentAuthorDep,
    authors: AuthorServiceDep,
) -> ApiResponse[AuthorResponse]:
    """Partially update the caller's profile.

    Omitted or null fields stay unchanged; ``""`` clears ``bio``/``avatar_url``.
    """
    try:
        author = authors.update_profile(current_author.id, payload)
    except ServiceError as exc:
        raise http_error(exc) from exc
    return success("Profile updated successfully", AuthorResponse.model_validate(author))


@router.delete("/me", response_model=ApiResponse[dict[str, Any]])
def delete_my_account(
    current_author: CurrentAuthorDep,
    authors: AuthorServiceDep,
) -> ApiResponse[dict[str, Any]]:
    """Delete the caller's account."""
    author_id = current_author.id
    try:
        authors.delete_account(author_id)
    except ServiceError as exc:
        raise http_error(exc, "Author not found") from exc
    return success("Account deleted successfully", {"deleted_id": author_id})
