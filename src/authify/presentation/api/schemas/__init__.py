"""Pydantic schemas for API request/response models."""

from authify.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from authify.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from authify.presentation.api.schemas.users import (
    ChangePasswordRequest,
    UpdateProfileRequest,
    UserEnvelope,
    UserResponse,
)

__all__ = [
    "ChangePasswordRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UpdateProfileRequest",
    "UserEnvelope",
    "UserResponse",
]
