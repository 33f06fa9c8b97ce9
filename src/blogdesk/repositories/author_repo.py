"""Data access helpers for working with authors."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from blogdesk.models.author import Author
from blogdesk.validation.updates import UpdatePlan

from .base import apply_plan

__all__ = ["AuthorRepository"]


class AuthorRepository:
    """Thin wrapper around database access for author accounts."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, author_id: int) -> Author | None:
        """Return an author by identifier."""
        return self.session.get(Author, author_id)

    def get_by_username(self, username: str) -> Author | None:
        """Return an author by (normalized) username."""
        return self.session.scalars(select(Author).where(Author.username == username)).first()

    def get_by_email(self, email: str) -> Author | None:
        """Return an author by (normalized) email."""
        return self.session.scalars(select(Author).where(Author.email == email)).first()

    def list_active(self, limit: int, offset: int) -> list[Author]:
        """Return active authors newest first."""
        result = self.session.execute(
            select(Author)
            .where(Author.is_active.is_(True))
            .order_by(Author.created_at.desc(), Author.id.desc())
            .limit(limit)
            .offset(offset)
        )
        return list(result.scalars())

    def create(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        bio: str = "",
        avatar_url: str = "",
    ) -> Author:
        """Insert a new, active and unverified author."""
        author = Author(
            username=username,
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            bio=bio,
            avatar_url=avatar_url,
            is_active=True,
            is_verified=False,
        )
        self.session.add(author)
        self.session.flush()
        self.session.refresh(author)
        return author

    def apply_update(self, plan: UpdatePlan) -> Author | None:
        """Apply a profile update plan; ``None`` if the author does not exist."""
        return apply_plan(self.session, Author, plan)

    def delete(self, author_id: int) -> bool:
        """Delete an author, returning False if it did not exist."""
        author = self.get_by_id(author_id)
        if author is None:
            return False
        self.session.delete(author)
        self.session.flush()
        return True
