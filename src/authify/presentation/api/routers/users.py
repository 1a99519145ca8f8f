"""Users router for the authenticated user's profile."""

import logging

from fastapi import APIRouter, status

from authify.application.dtos import UserProfileDTO
from authify.presentation.api.dependencies import (
    CurrentUserId,
    DBSession,
    ProfileServiceDep,
)
from authify.presentation.api.schemas import (
    ChangePasswordRequest,
    ErrorResponse,
    UpdateProfileRequest,
    UserEnvelope,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _envelope(message: str, user: UserProfileDTO) -> UserEnvelope:
    return UserEnvelope(
        message=message,
        user=UserResponse.from_dto(user),
        status=status.HTTP_200_OK,
    )


@router.get(
    "/profile",
    summary="Get current user's profile",
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_profile(
    user_id: CurrentUserId,
    profile_service: ProfileServiceDep,
) -> UserEnvelope:
    user = await profile_service.get_profile(user_id)
    return _envelope("User fetched successfully", user)


@router.put(
    "/profile",
    summary="Update current user's profile",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or no changes"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email or username taken"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    user_id: CurrentUserId,
    profile_service: ProfileServiceDep,
    session: DBSession,
) -> UserEnvelope:
    """
    Change username and/or email.

    Omitted or empty fields are left as they are. A request that changes
    nothing is rejected with 400.
    """
    try:
        user = await profile_service.update_profile(
            user_id,
            username=request.username,
            email=request.email,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _envelope("Profile updated successfully", user)


@router.put(
    "/change-password",
    summary="Change current user's password",
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Invalid input or incorrect current password",
        },
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user_id: CurrentUserId,
    profile_service: ProfileServiceDep,
    session: DBSession,
) -> UserEnvelope:
    """Change password after re-verifying the current one."""
    try:
        user = await profile_service.change_password(
            user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _envelope("Password changed successfully", user)
