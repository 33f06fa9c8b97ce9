"""Validation rules for post create and update payloads."""
from __future__ import annotations

from blogdesk.schemas.post import PostCreate, PostUpdate

from .result import Failure, ValidationResult
from .status import POST_STATUSES, PostStatus

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
SLUG_MIN_LENGTH = 3
SLUG_MAX_LENGTH = 200


def _title_length_ok(title: str) -> bool:
    return TITLE_MIN_LENGTH <= len(title) <= TITLE_MAX_LENGTH


def _slug_length_ok(slug: str) -> bool:
    return SLUG_MIN_LENGTH <= len(slug) <= SLUG_MAX_LENGTH


def _invalid_status(status: str) -> Failure:
    return Failure.invalid(f"invalid status: {status}")


def validate_post_create(req: PostCreate) -> ValidationResult:
    """Check a create payload and return the first violated rule, if any.

    Rules are evaluated in a fixed order: title, content, slug, author, status.
    An empty status counts as ``draft``; ``req`` itself is left untouched.
    """
    if not req.title:
        return Failure.invalid("title is required")
    if not _title_length_ok(req.title):
        return Failure.invalid("title must be between 3 and 200 characters")
    if not req.content:
        return Failure.invalid("content is required")
    if len(req.content) < CONTENT_MIN_LENGTH:
        return Failure.invalid("content must be at least 10 characters")
    if not req.slug:
        return Failure.invalid("slug is required")
    if not _slug_length_ok(req.slug):
        return Failure.invalid("slug must be between 3 and 200 characters")
    if req.author_id <= 0:
        return Failure.invalid("valid author ID is required")

    status = req.status or PostStatus.DRAFT.value
    if status not in POST_STATUSES:
        return _invalid_status(status)
    return None


def validate_post_update(req: PostUpdate) -> ValidationResult:
    """Check the fields present in a partial update.

    Absent (``None``) fields are never an error. Present fields must satisfy
    the same rules as on create.
    """
    if req.title is not None and not _title_length_ok(req.title):
        return Failure.invalid("title must be between 3 and 200 characters")
    if req.content is not None and len(req.content) < CONTENT_MIN_LENGTH:
        return Failure.invalid("content must be at least 10 characters")
    if req.slug is not None:
        if not req.slug:
            return Failure.invalid("slug cannot be empty")
        if not _slug_length_ok(req.slug):
            return Failure.invalid("slug must be between 3 and 200 characters")
    if req.status is not None and req.status not in POST_STATUSES:
        return _invalid_status(req.status)
    return None
