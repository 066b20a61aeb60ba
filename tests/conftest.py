# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("STORAGE_BACKEND", "memory")

from comrade.db.session import Base
from comrade.db.session import get_db as app_get_session
from comrade.main import app as fastapi_app
from comrade.models import Comment, Post
from comrade.schemas.user import User
from comrade.services.store import LocalStore
from comrade.storage.kv import MemoryKeyValueStore

TEST_DB_URL = "sqlite://"


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
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db_session(engine: Engine, session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture()
def client(app: FastAPI, db_session: Session) -> Iterator[TestClient]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        with TestClient(app, base_url="http://test") as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    """Return an empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture()
def store(kv: MemoryKeyValueStore) -> LocalStore:
    """Return a logged-out local store over ``kv``."""
    return LocalStore(kv)


@pytest_asyncio.fixture()
async def test_user(store: LocalStore) -> User:
    """Log in the primary test user and return it."""
    return await store.auth.login("Test User", "sf")


@pytest.fixture()
def test_post(db_session: Session) -> Iterator[Post]:
    """Create a baseline server-side post."""
    post = Post(
        author_id="author-1",
        author_name="Test User",
        author_avatar_color="#8B7355",
        content="Test post content",
        city="sf",
        is_org_post=False,
        likes=0,
        comment_count=0,
    )
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    yield post


@pytest.fixture()
def test_comment(db_session: Session, test_post: Post) -> Iterator[Comment]:
    """Create a top-level comment on ``test_post``."""
    comment = Comment(
        post_id=test_post.id,
        author_id="author-2",
        author_name="Other User",
        content="First!",
        likes=0,
    )
    db_session.add(comment)
    test_post.comment_count += 1
    db_session.commit()
    db_session.refresh(comment)
    yield comment
