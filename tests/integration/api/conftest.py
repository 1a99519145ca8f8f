"""Pytest fixtures for API integration tests."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from authify.presentation.api.app import create_app
from authify.presentation.api.config import get_api_settings
from authify.presentation.api.dependencies import get_db_session
from authify_config.settings import Settings

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        _env_file=None,
        jwt_secret=SecretStr(TEST_JWT_SECRET),
        password_hash_rounds=4,
        db_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        api_cookie_secure=False,  # Allow HTTP in tests
    )


@pytest.fixture
def test_db_engine(api_settings):
    """Create a file-backed SQLite engine for one test.

    Tables are created by the application lifespan, which runs on the
    TestClient's event loop together with every request.
    """
    return create_async_engine(api_settings.database_url, echo=False)


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client backed by a throwaway database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    with (
        patch("authify.presentation.api.app.get_engine", return_value=test_db_engine),
        TestClient(app) as client,
    ):
        yield client


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "username": "alice",
        "email": "alice@x.com",
        "password": "Passw0rd",
    }


@pytest.fixture
def registered_user(test_client, registered_user_data) -> dict:
    """Register the test user and return the public projection."""
    response = test_client.post("/auth/register", json=registered_user_data)
    assert response.status_code == 201
    return response.json()["user"]


@pytest.fixture
def access_token(test_client, registered_user, registered_user_data) -> str:
    """Log the test user in and return the access token."""
    response = test_client.post(
        "/auth/login",
        json={
            "email": registered_user_data["email"],
            "password": registered_user_data["password"],
        },
    )
    assert response.status_code == 201
    # Tests choose explicitly between header and cookie
    test_client.cookies.clear()
    return response.json()["accessToken"]


@pytest.fixture
def auth_headers(access_token) -> dict:
    """Get auth headers for the registered user."""
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def jwt_secret() -> str:
    """Secret the test app signs tokens with."""
    return TEST_JWT_SECRET
