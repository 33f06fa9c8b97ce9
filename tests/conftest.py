# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from blogdesk.core.security import create_access_token, hash_password
from blogdesk.db.session import Base
from blogdesk.db.session import get_db as app_get_session
from blogdesk.main import app as fastapi_app
from blogdesk.models import Author, Post

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct-horse-42"

_SLUG_COUNTER = count(1)
_AUTHOR_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_author(db_session: Session) -> Callable[..., Author]:
    """Return a factory persisting authors with ``TEST_PASSWORD``."""

    def _make(**overrides: Any) -> Author:
        n = next(_AUTHOR_COUNTER)
        fields: dict[str, Any] = {
            "username": f"writer_{n}",
            "email": f"writer{n}@example.com",
            "password_hash": hash_password(TEST_PASSWORD),
            "first_name": "Ada",
            "last_name": "Lovelace",
            "bio": "",
            "avatar_url": "",
            "is_active": True,
            "is_verified": False,
        }
        fields.update(overrides)
        author = Author(**fields)
        db_session.add(author)
        db_session.commit()
        db_session.refresh(author)
        return author

    return _make


@pytest.fixture()
def test_author(make_author: Callable[..., Author]) -> Author:
    """Create and return a persisted, active author."""
    return make_author(username="ada_l", email="ada@example.com", bio="Mathematician")


@pytest.fixture()
def auth_headers(test_author: Author) -> dict[str, str]:
    """Return authorization headers for ``test_author``."""
    token = create_access_token(test_author.id, test_author.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory persisting posts with unique slugs."""

    def _make(**overrides: Any) -> Post:
        n = next(_SLUG_COUNTER)
        fields: dict[str, Any] = {
            "title": f"Post number {n}",
            "content": "Body text long enough to be valid.",
            "slug": f"post-number-{n}",
            "author_id": 1,
            "status": "draft",
        }
        fields.update(overrides)
        post = Post(**fields)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make


@pytest.fixture()
def test_post(make_post: Callable[..., Post]) -> Post:
    """Create a baseline post for tests."""
    return make_post(title="Hello world", slug="hello-world")


@pytest.fixture()
def author_password() -> str:
    """Plain-text password shared by authors built with ``make_author``."""
    return TEST_PASSWORD
