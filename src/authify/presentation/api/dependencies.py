"""FastAPI dependency injection for the Authify API.

Provides dependencies for:
- Database sessions
- Authentication (current user id from JWT)
- Service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator
from uuid import UUID

from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from authify.application.services import AuthenticationService, ProfileService
from authify.infrastructure.persistence.sqlalchemy import (
    Base,
    UserRepositorySQLAlchemy,
)
from authify.presentation.api.config import get_api_settings
from authify_auth import (
    InvalidTokenError,
    JWTConfig,
    JWTService,
    PasswordHashingService,
)
from authify_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

# Cookie carrying the access token for browser clients
ACCESS_TOKEN_COOKIE = "accessToken"  # NOQA: S105


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = engine or get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        JWTConfig(
            secret_key=settings.jwt_secret.get_secret_value(),
            access_token_expire_hours=settings.jwt_access_token_expire_hours,
        ),
    )


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service with all dependencies."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_profile_service(
    session: DBSession,
    password_service: PasswordHashingService = Depends(get_password_service),
) -> ProfileService:
    """Get profile service bound to the request's session."""
    return ProfileService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
    )


# Type alias for injected profile service
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    access_token_cookie: Annotated[
        str | None,
        Cookie(alias=ACCESS_TOKEN_COOKIE),
    ] = None,
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UUID:
    """
    FastAPI dependency resolving the authenticated user's id.

    The token is read from the Authorization header, falling back to the
    ``accessToken`` cookie. The user itself is not loaded here; a token for
    a user that no longer exists reaches the service and yields 404.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, or expired
    """
    token = credentials.credentials if credentials is not None else access_token_cookie
    if not token:
        raise _unauthorized()

    try:
        payload = jwt_service.verify_token(token)
    except InvalidTokenError as e:
        logger.warning("Rejected token: %s", e)
        raise _unauthorized() from e

    return payload.user_id


# Type alias for injected current user id
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
