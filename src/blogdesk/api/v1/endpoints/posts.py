# src/blogdesk/api/v1/endpoints/posts.py
"""Post CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, HTTPException, Query, status

from blogdesk.schemas.common import ApiResponse
from blogdesk.schemas.post import PostCreate, PostListResponse, PostResponse, PostUpdate
from blogdesk.services import ServiceError

from ..dependencies import PostServiceDep
from ..responses import http_error, success

router = APIRouter(prefix="/posts", tags=["posts"])


def _require_positive_id(post_id: int) -> int:
    if post_id <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "Invalid post ID", "error": "post ID must be positive"},
        )
    return post_id


@router.get("", response_model=ApiResponse[PostListResponse])
def list_posts(
    posts: PostServiceDep,
    page: str | None = Query(None, description="1-based page number"),
    page_size: str | None = Query(None, description="Posts per page (1-100)"),
) -> ApiResponse[PostListResponse]:
    """List posts newest first.

    Unparsable or out-of-range pagination input falls back to page 1 / 10 per page.
    """
    return success("Posts retrieved successfully", posts.list_posts(page, page_size))


@router.get("/{post_id}", response_model=ApiResponse[PostResponse])
def get_post(post_id: int, posts: PostServiceDep) -> ApiResponse[PostResponse]:
    """Get a specific post by ID.

    Raises:
        HTTPException: If the ID is not positive or the post does not exist
    """
    _require_positive_id(post_id)
    try:
        post = posts.get_post(post_id)
    except ServiceError as exc:
        raise http_error(exc, "Post not found") from exc
    return success("Post retrieved successfully", PostResponse.model_validate(post))


@router.post(
    "",
    response_model=ApiResponse[PostResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_post(payload: PostCreate, posts: PostServiceDep) -> ApiResponse[PostResponse]:
    """Create a new post.

    Args:
        payload: Title, content, slug, author and optional status
        posts: Post service

    Returns:
        The created post wrapped in the success envelope

    Raises:
        HTTPException: 400 on a rule violation, 409 if the slug is taken
    """
    try:
        post = posts.create_post(payload)
    except ServiceError as exc:
        raise http_error(exc) from exc
    return success("Post created successfully", PostResponse.model_validate(post))


@router.put("/{post_id}", response_model=ApiResponse[PostResponse])
def update_post(
    post_id: int,
    payload: PostUpdate,
    posts: PostServiceDep,
) -> ApiResponse[PostResponse]:
    """Partially update a post; omitted or null fields stay unchanged.

    Raises:
        HTTPException: 400 on a rule violation or empty update, 404 if missing,
                       409 if the new slug is taken
    """
    _require_positive_id(post_id)
    try:
        post = posts.update_post(post_id, payload)
    except ServiceError as exc:
        raise http_error(exc) from exc
    return success("Post updated successfully", PostResponse.model_validate(post))


@router.delete("/{post_id}", response_model=ApiResponse[dict[str, Any]])
def delete_post(post_id: int, posts: PostServiceDep) -> ApiResponse[dict[str, Any]]:
    """Delete a post by ID."""
    _require_positive_id(post_id)
    try:
        posts.delete_post(post_id)
    except ServiceError as exc:
        raise http_error(exc, "Post not found") from exc
    return success("Post deleted successfully", {"deleted_id": post_id})
