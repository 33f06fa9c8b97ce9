"""Service-level operations for blog posts."""
from __future__ import annotations

import logging
import math

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blogdesk.models.post import Post
from blogdesk.repositories.post_repo import PostRepository
from blogdesk.schemas.post import PostCreate, PostListResponse, PostResponse, PostUpdate
from blogdesk.validation import PostStatus, build_post_update, validate_post_create, validate_post_update
from blogdesk.validation.result import Failure

from .errors import ConflictError, NotFoundError, error_for_failure
from .pagination import QueryInt, normalize_pagination

logger = logging.getLogger(__name__)


class PostService:
    """Create, read, update and delete posts."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.repo = PostRepository(session)

    def create_post(self, req: PostCreate) -> Post:
        """Validate and persist a new post.

        Raises:
            ValidationFailedError: If a field rule is violated.
            ConflictError: If the slug is already taken.
        """
        failure = validate_post_create(req)
        if failure is not None:
            raise error_for_failure(failure)

        if self.repo.get_by_slug(req.slug) is not None:
            raise ConflictError("slug already exists")

        try:
            post = self.repo.create(
                title=req.title,
                content=req.content,
                slug=req.slug,
                author_id=req.author_id,
                status=req.status or PostStatus.DRAFT.value,
            )
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("slug already exists") from exc

        logger.info("Post created successfully with ID: %d", post.id)
        return post

    def get_post(self, post_id: int) -> Post:
        """Return a post or raise :class:`NotFoundError`."""
        post = self.repo.get_by_id(post_id)
        if post is None:
            raise NotFoundError("post not found")
        return post

    def list_posts(self, page: QueryInt, page_size: QueryInt) -> PostListResponse:
        """Return one page of posts, newest first."""
        page, page_size = normalize_pagination(page, page_size)
        offset = (page - 1) * page_size

        total_count = self.repo.count()
        posts = self.repo.list_page(limit=page_size, offset=offset)

        return PostListResponse(
            posts=[PostResponse.model_validate(post) for post in posts],
            total_count=total_count,
            page=page,
            page_size=page_size,
            total_pages=math.ceil(total_count / page_size),
        )

    def update_post(self, post_id: int, req: PostUpdate) -> Post:
        """Apply a partial update to a post.

        Raises:
            ValidationFailedError: If a supplied field is invalid.
            NothingToUpdateError: If no field was supplied.
            NotFoundError: If the post does not exist.
            ConflictError: If the new slug is already taken.
        """
        failure = validate_post_update(req)
        if failure is not None:
            raise error_for_failure(failure)
        plan = build_post_update(post_id, req)
        if isinstance(plan, Failure):
            raise error_for_failure(plan)

        if self.repo.get_by_id(post_id) is None:
            raise NotFoundError("post not found")

        if req.slug is not None:
            existing = self.repo.get_by_slug(req.slug)
            if existing is not None and existing.id != post_id:
                raise ConflictError("slug already exists")

        try:
            post = self.repo.apply_update(plan)
            if post is None:
                raise NotFoundError("post not found")
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ConflictError("slug already exists") from exc

        logger.info("Post updated successfully: %d (%s)", post.id, ", ".join(plan.columns))
        return post

    def delete_post(self, post_id: int) -> None:
        """Delete a post or raise :class:`NotFoundError`."""
        if not self.repo.delete(post_id):
            raise NotFoundError("post not found")
        self.session.commit()
        logger.info("Post deleted successfully: %d", post_id)
