"""DTOs for user data exposed outside the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from authify.domain.user import User


@dataclass(frozen=True)
class UserProfileDTO:
    """Public projection of a user. Never carries the password hash."""

    id: UUID
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> UserProfileDTO:
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login."""

    access_token: str
    user: UserProfileDTO
