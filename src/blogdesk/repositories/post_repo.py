"""Data access helpers for working with posts."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from blogdesk.models.post import Post
from blogdesk.validation.updates import UpdatePlan

from .base import apply_plan

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def get_by_slug(self, slug: str) -> Post | None:
        """Return a post by its unique slug."""
        return self.session.scalars(select(Post).where(Post.slug == slug)).first()

    def list_page(self, limit: int, offset: int) -> list[Post]:
        """Return posts newest first, windowed by ``limit``/``offset``."""
        result = self.session.execute(
            select(Post)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars())

    def count(self) -> int:
        """Return the total number of posts."""
        return self.session.scalar(select(func.count()).select_from(Post)) or 0

    def create(
        self,
        *,
        title: str,
        content: str,
        slug: str,
        author_id: int,
        status: str,
    ) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(
            title=title,
            content=content,
            slug=slug,
            author_id=author_id,
            status=status,
        )
        self.session.add(post)
        self.session.flush()
        self.session.refresh(post)
        return post

    def apply_update(self, plan: UpdatePlan) -> Post | None:
        """Apply a post update plan; ``None`` if the post does not exist."""
        return apply_plan(self.session, Post, plan)

    def delete(self, post_id: int) -> bool:
        """Delete a post, returning False if it did not exist."""
        post = self.get_by_id(post_id)
        if post is None:
            return False
        self.session.delete(post)
        self.session.flush()
        return True
