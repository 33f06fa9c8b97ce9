"""Data access helpers wrapping the SQLAlchemy session."""

from .author_repo import AuthorRepository
from .post_repo import PostRepository

__all__ = ["AuthorRepository", "PostRepository"]
