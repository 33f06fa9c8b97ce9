"""Shared plumbing for applying update plans to ORM rows."""
from __future__ import annotations

import logging
from typing import TypeVar

from sqlalchemy.orm import Session

from blogdesk.db.session import Base
from blogdesk.db.time import utcnow
from blogdesk.validation.updates import UpdatePlan

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


def apply_plan(session: Session, model: type[ModelT], plan: UpdatePlan) -> ModelT | None:
    """Apply ``plan`` to the row it targets and return the refreshed row.

    Returns ``None`` when no row has the plan's id.
    """
    row = session.get(model, plan.row_id)
    if row is None:
        return None

    logger.debug(
        "UPDATE %s SET %s WHERE id = %s",
        model.__tablename__,
        ", ".join(plan.set_clauses()),
        plan.id_placeholder,
    )
    for column, value in plan.assignments:
        setattr(row, column, value)
    if plan.refresh_updated_at:
        row.updated_at = utcnow()

    session.flush()
    session.refresh(row)
    return row
