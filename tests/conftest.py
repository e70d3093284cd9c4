"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import httpx
import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.passwords import PasslibPasswordHasher
from infrastructure.database.models import Base
from infrastructure.github.client import GitHubClient

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_SECRET = "test-secret-key"

GITHUB_TEST_URL = "https://github.test"

# Canned repositories served by the fake GitHub API
GITHUB_REPOS = [
    {"id": 1, "name": "hello-world", "html_url": "https://github.com/octocat/hello-world"},
    {"id": 2, "name": "spoon-knife", "html_url": "https://github.com/octocat/spoon-knife"},
]


def _fake_github(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/users/octocat/repos":
        return httpx.Response(200, json=GITHUB_REPOS)
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for repository tests."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key=TEST_SECRET,
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def github_client() -> GitHubClient:
    """GitHub client wired to an in-process fake API."""
    return GitHubClient(
        base_url=GITHUB_TEST_URL,
        access_token="",
        transport=httpx.MockTransport(_fake_github),
    )


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
    github_client: GitHubClient,
) -> FastAPI:
    """
    Create the application with database, auth and GitHub overrides.

    This app:
    - Uses an in-memory SQLite database
    - Signs and checks tokens with the test secret
    - Talks to a fake GitHub API
    """
    from api.dependencies.auth import get_auth_provider
    from api.dependencies.services import (
        get_github_client,
        get_post_service,
        get_profile_service,
        get_user_service,
    )
    from domain.services.post_service import PostService
    from domain.services.profile_service import ProfileService
    from domain.services.user_service import UserService
    from infrastructure.database.session import get_async_session
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    user_service = UserService(test_uow_factory, auth_provider, PasslibPasswordHasher())
    profile_service = ProfileService(test_uow_factory)
    post_service = PostService(test_uow_factory)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_post_service] = lambda: post_service
    app.dependency_overrides[get_github_client] = lambda: github_client
    app.dependency_overrides[get_async_session] = override_get_async_session

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


RegisterUser = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
def register_user(client: AsyncClient) -> RegisterUser:
    """Register an account through the API and return its auth headers."""

    async def _register(
        name: str = "Ada Lovelace",
        email: str = "ada@example.com",
        password: str = "secret123",
    ) -> dict[str, str]:
        response = await client.post(
            "/api/users",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"x-auth-token": response.json()["token"]}

    return _register
