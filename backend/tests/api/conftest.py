"""API test fixtures — async DB + FastAPI test client + authenticated users.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so readiness probes see the test engine
    - seed_posts mirrors a small realistic list owned by the seeded user

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Users seeded directly in the DB (hash_password), tokens minted with the
      same settings the app reads: tests exercise /api/login separately
"""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from bloglist.config import get_settings
from bloglist.db.base import Base
from bloglist.infrastructure.auth import create_access_token, hash_password
from bloglist.infrastructure.database import get_db, DatabaseSessionManager
from bloglist.models.post import Post
from bloglist.models.user import User
import bloglist.infrastructure.database as db_module
from bloglist.main import app
from tests.api.post_data import INITIAL_POSTS


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


async def _create_user(db: AsyncSession, username: str, password: str, name: str) -> User:
    user = User(
        username=username, name=name,
        password_hash=hash_password(password), posts=[],
    )
    db.add(user)
    await db.commit()
    return user


def _bearer(user: User) -> dict:
    settings = get_settings()
    token = create_access_token(
        user.id, user.username, settings.secret_key, settings.token_algorithm,
    )
    return {"Authorization": f"bearer {token}"}


@pytest.fixture
async def seed_user(test_db):
    return await _create_user(test_db, "root", "sekret", "Superuser")


@pytest.fixture
async def other_user(test_db):
    return await _create_user(test_db, "mluukkai", "salainen", "Matti Luukkainen")


@pytest.fixture
def auth_headers(seed_user):
    return _bearer(seed_user)


@pytest.fixture
def other_auth_headers(other_user):
    return _bearer(other_user)


@pytest.fixture
async def seed_posts(test_db, seed_user):
    """Insert INITIAL_POSTS one commit at a time so created_at preserves order."""
    for data in INITIAL_POSTS:
        test_db.add(Post(**data, user_id=seed_user.id))
        await test_db.commit()
    result = await test_db.execute(select(Post).order_by(Post.created_at))
    return list(result.scalars().all())


@pytest.fixture
def posts_in_db(test_session_factory):
    """Callable returning the stored posts, read through a fresh session."""
    async def _read() -> list[Post]:
        async with test_session_factory() as session:
            result = await session.execute(select(Post).order_by(Post.created_at))
            return list(result.scalars().all())
    return _read


@pytest.fixture
def users_in_db(test_session_factory):
    async def _read() -> list[User]:
        async with test_session_factory() as session:
            result = await session.execute(select(User).order_by(User.created_at))
            return list(result.scalars().all())
    return _read
