"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from authify.presentation.api.schemas.users import UserResponse


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    username: str = Field(..., min_length=1, max_length=64)
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        description="Password (at least 8 characters, at most 72 bytes in UTF-8)",
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "username": "johndoe",
                "email": "user@example.com",
                "password": "Password123!",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=72)

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "Password123!",
            },
        },
    )


class RegisterResponse(BaseModel):
    """Response schema for a successful registration."""

    message: str
    user: UserResponse
    status: int


class LoginResponse(BaseModel):
    """Response schema for a successful login.

    The token is also set as an HttpOnly ``accessToken`` cookie.
    """

    message: str
    access_token: str = Field(serialization_alias="accessToken")
    status: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful",
                "accessToken": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "status": 201,
            },
        },
    )
