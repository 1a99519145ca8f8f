"""User schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field

from authify.application.dtos import UserProfileDTO


class UserResponse(BaseModel):
    """Public projection of a user. Never includes the password hash."""

    id: UUID
    username: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_dto(cls, dto: UserProfileDTO) -> "UserResponse":
        return cls.model_validate(dto)


class UserEnvelope(BaseModel):
    """Response wrapping a user with a message and status echo."""

    message: str
    user: UserResponse
    status: int


class UpdateProfileRequest(BaseModel):
    """Request schema for a profile update. Omitted fields stay unchanged."""

    username: str | None = Field(default=None, min_length=1, max_length=64)
    email: EmailStr | None = None

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "username": "newUsername123",
                "email": "newemail@example.com",
            },
        },
    )


class ChangePasswordRequest(BaseModel):
    """Request schema for changing the current user's password."""

    current_password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        validation_alias=AliasChoices("currentPassword", "current_password"),
    )
    new_password: str = Field(
        ...,
        min_length=8,
        max_length=72,
        validation_alias=AliasChoices("newPassword", "new_password"),
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "currentPassword": "currentPassword123",
                "newPassword": "newPassword456",
            },
        },
    )
