# src/blogdesk/models/__init__.py
"""SQLAlchemy models for the blogdesk application."""

from .author import Author
from .post import POST_STATUSES, Post, PostStatus

__all__ = [
    "Author",
    "Post", "PostStatus", "POST_STATUSES",
]
