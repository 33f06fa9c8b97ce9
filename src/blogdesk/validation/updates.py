"""Translate sparse update payloads into ordered mutation plans.

A plan lists the columns to set, in a fixed per-resource order, and always
refreshes ``updated_at``. Positional parameters are numbered in the same
order as the assignments and the row id is always the last parameter, so one
plan can drive an ``UPDATE ... SET ... WHERE id = $n`` of any width.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from blogdesk.schemas.author import AuthorUpdateRequest
from blogdesk.schemas.post import PostUpdate

from .result import Failure, FailureKind

POST_UPDATE_FIELDS = ("title", "content", "slug", "status")
AUTHOR_UPDATE_FIELDS = ("email", "first_name", "last_name", "bio", "avatar_url")

TIMESTAMP_REFRESH = "updated_at = NOW()"


@dataclass(frozen=True)
class UpdatePlan:
    """Ordered column assignments for one row."""

    row_id: int
    assignments: tuple[tuple[str, str], ...]
    refresh_updated_at: bool = True

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in assignment order."""
        return tuple(column for column, _ in self.assignments)

    @property
    def parameters(self) -> tuple[object, ...]:
        """Positional parameters: assigned values, then the row id."""
        return (*(value for _, value in self.assignments), self.row_id)

    @property
    def id_placeholder(self) -> str:
        """Placeholder bound to the row id (always the last ordinal)."""
        return f"${len(self.assignments) + 1}"

    def set_clauses(self) -> list[str]:
        """Return ``column = $n`` fragments followed by the timestamp refresh."""
        clauses = [
            f"{column} = ${index}"
            for index, (column, _) in enumerate(self.assignments, start=1)
        ]
        if self.refresh_updated_at:
            clauses.append(TIMESTAMP_REFRESH)
        return clauses

    def values(self) -> dict[str, str]:
        """Return the assignments as a column -> value mapping."""
        return dict(self.assignments)


def _compose(
    row_id: int,
    fields: Iterable[tuple[str, str | None]],
) -> UpdatePlan | Failure:
    assignments = tuple((column, value) for column, value in fields if value is not None)
    if not assignments:
        return Failure(FailureKind.NO_FIELDS_TO_UPDATE, "no fields to update")
    return UpdatePlan(row_id=row_id, assignments=assignments)


def build_post_update(post_id: int, req: PostUpdate) -> UpdatePlan | Failure:
    """Build the mutation plan for a post.

    Fields are taken in the order title, content, slug, status. Returns a
    ``NO_FIELDS_TO_UPDATE`` failure when none are present.
    """
    return _compose(post_id, ((name, getattr(req, name)) for name in POST_UPDATE_FIELDS))


def build_author_update(author_id: int, req: AuthorUpdateRequest) -> UpdatePlan | Failure:
    """Build the mutation plan for an author profile.

    Values are copied verbatim, so ``bio=""`` or ``avatar_url=""`` clear the
    column. Like posts, an update with nothing present is rejected.
    """
    return _compose(author_id, ((name, getattr(req, name)) for name in AUTHOR_UPDATE_FIELDS))
