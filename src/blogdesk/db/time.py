"""Clock used for post and author timestamps."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return an aware UTC ``datetime`` for ``created_at``/``updated_at`` columns."""
    return datetime.now(UTC)
