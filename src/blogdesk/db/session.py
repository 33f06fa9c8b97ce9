"""Engine, session factory and schema helpers for blogdesk."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from blogdesk.core.settings import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for the posts and authors tables."""


# Models register themselves on Base.metadata at import time.
import blogdesk.models  # noqa: E402,F401


def _connect_args(url: str) -> dict[str, Any]:
    # Sessions cross threads when sync endpoints run in the threadpool.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url_sync,
    connect_args=_connect_args(settings.database_url_sync),
    pool_pre_ping=True,
    echo=settings.sql_debug,
)

# Objects stay readable after commit so services can return them to the API layer.
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create the posts and authors tables if they do not exist."""
    logger.info("Creating tables on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """Drop the posts and authors tables."""
    logger.info("Dropping tables on %s", engine.url.render_as_string(hide_password=True))
    Base.metadata.drop_all(bind=engine)
