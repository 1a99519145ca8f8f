"""Authentication router for registration, login, and logout."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from authify.presentation.api.config import get_api_settings
from authify.presentation.api.dependencies import (
    ACCESS_TOKEN_COOKIE,
    AuthService,
    DBSession,
)
from authify.presentation.api.schemas import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from authify_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def _set_access_token_cookie(
    response: Response,
    token: str,
    settings: Settings,
) -> None:
    """Set the access token as an HttpOnly cookie.

    The cookie lives as long as the token itself and is sent to every path,
    so browser clients can call protected endpoints without a header.
    """
    response.set_cookie(
        key=ACCESS_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
        max_age=settings.jwt_access_token_expire_hours * 3600,
        path="/",
    )


def _clear_access_token_cookie(response: Response, settings: Settings) -> None:
    """Clear the access token cookie (for logout)."""
    response.delete_cookie(
        key=ACCESS_TOKEN_COOKIE,
        path="/",
        httponly=True,
        secure=settings.api_cookie_secure,
        samesite=settings.api_cookie_samesite,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email or username taken"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> RegisterResponse:
    """
    Create a new account.

    Returns the public projection of the user; no token is issued, the
    client logs in separately.
    """
    try:
        user = await auth_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return RegisterResponse(
        message="Registration successful",
        user=UserResponse.from_dto(user),
        status=status.HTTP_201_CREATED,
    )


@router.post(
    "/login",
    status_code=status.HTTP_201_CREATED,
    summary="Authenticate user",
    responses={
        201: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> LoginResponse:
    """
    Authenticate with email and password.

    The access token is returned in the body and also set as an HttpOnly
    ``accessToken`` cookie.
    """
    try:
        result = await auth_service.login(
            email=request.email,
            password=request.password,
        )
        # Persists a rehashed password, if any
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    _set_access_token_cookie(response, result.access_token, settings)

    return LoginResponse(
        message="Login successful",
        access_token=result.access_token,
        status=status.HTTP_201_CREATED,
    )


@router.post(
    "/logout",
    summary="Logout user",
    responses={
        200: {"description": "Logged out successfully"},
    },
)
async def logout(
    response: Response,
    settings: SettingsDep,
) -> MessageResponse:
    """Clear the access token cookie. Issued tokens stay valid until expiry."""
    _clear_access_token_cookie(response, settings)
    logger.debug("User logged out (access token cookie cleared)")
    return MessageResponse(message="Logout successful", status=status.HTTP_200_OK)
