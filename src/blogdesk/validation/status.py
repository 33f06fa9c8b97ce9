"""Post lifecycle states."""
from __future__ import annotations

from enum import StrEnum


class PostStatus(StrEnum):
    """Publication states a post may be in.

    Any state may be set from any other; only membership is enforced.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


POST_STATUSES = frozenset(status.value for status in PostStatus)
