"""SQLAlchemy model for blog posts."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blogdesk.db.session import Base
from blogdesk.db.time import utcnow
from blogdesk.validation.status import POST_STATUSES, PostStatus

_STATUS_LIST = ", ".join(f"'{status}'" for status in sorted(POST_STATUSES))


class Post(Base):
    """A blog post written by an author."""

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint(
            f"status IN ({_STATUS_LIST})",
            name="ck_posts_status",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False, unique=True, index=True)
    # Plain reference; the author row is not required to exist.
    author_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=PostStatus.DRAFT.value,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
