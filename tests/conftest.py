"""
Pytest fixtures - isolated in-memory database, HTTP client, signed-in users.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from belongings.core.security import create_access_token, hash_password
from belongings.db.base import Base
from belongings.db.models import User
from belongings.db.session import enable_sqlite_foreign_keys, get_db
from belongings.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    # StaticPool keeps the single in-memory database alive across connections
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool, echo=False)
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


async def _make_user(session: AsyncSession, email: str, name: str) -> User:
    user = User(email=email, hashed_password=hash_password("password123"), name=name)
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    return await _make_user(session, "owner@example.com", "Owner")


@pytest_asyncio.fixture
async def other_user(session: AsyncSession) -> User:
    return await _make_user(session, "someone-else@example.com", "Someone Else")


@pytest.fixture
def auth_headers(test_user: User) -> dict:
    token = create_access_token(test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers(other_user: User) -> dict:
    token = create_access_token(other_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def product(client: AsyncClient, auth_headers: dict) -> dict:
    """A product owned by ``test_user``, created through the API."""
    response = await client.post(
        "/api/v1/products",
        headers=auth_headers,
        json={
            "name": "Fridge",
            "purchase_date": "2024-01-01",
            "warranty_months": 24,
            "expected_lifespan_years": 10,
            "expected_usage_hours": 100,
        },
    )
    assert response.status_code == 201
    return response.json()
