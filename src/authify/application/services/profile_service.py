"""Profile service for reading and changing the current user's account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from authify.application.dtos import UserProfileDTO
from authify.domain.user import (
    Email,
    InvalidCurrentPasswordError,
    NoChangesError,
    UniquenessViolationError,
    User,
    UserConflictError,
    UserNotFoundError,
)
from authify_auth import PasswordHashingService

if TYPE_CHECKING:
    from authify.domain.user import UserRepository

logger = logging.getLogger(__name__)


class ProfileService:
    """
    Application service for profile management.

    Provides:
    - Profile retrieval (public projection only)
    - Profile update with uniqueness re-validation
    - Password change with current-password re-verification

    Conflicts are checked email first, then username; the first one found
    is reported.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def get_profile(self, user_id: UUID) -> UserProfileDTO:
        user = await self._load(user_id)
        return UserProfileDTO.from_user(user)

    async def update_profile(
        self,
        user_id: UUID,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> UserProfileDTO:
        user = await self._load(user_id)

        new_email: Email | None = None
        if email:
            candidate = Email(email)
            if candidate != user.email_obj:
                taken = await self._user_repo.find_by_email_excluding(
                    candidate,
                    user_id,
                )
                if taken is not None:
                    raise UserConflictError.email_taken()
                new_email = candidate

        new_username: str | None = None
        if username and username != user.username:
            taken = await self._user_repo.find_by_username_excluding(
                username,
                user_id,
            )
            if taken is not None:
                raise UserConflictError.username_taken()
            new_username = username

        if new_email is None and new_username is None:
            raise NoChangesError

        if new_email is not None:
            user.change_email(new_email)
        if new_username is not None:
            user.change_username(new_username)

        try:
            saved = await self._user_repo.update(user)
        except UniquenessViolationError as e:
            # Lost a race against a concurrent write on the same value
            raise self._conflict_for(e.field) from e

        logger.info(
            "Profile updated for user %s (fields: %s)",
            user_id,
            ", ".join(
                name
                for name, value in (("email", new_email), ("username", new_username))
                if value is not None
            ),
        )
        return UserProfileDTO.from_user(saved)

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> UserProfileDTO:
        user = await self._load(user_id)

        if not self._password_service.verify(current_password, user.password_hash):
            raise InvalidCurrentPasswordError

        user.change_password_hash(self._password_service.hash(new_password))
        saved = await self._user_repo.update(user)

        logger.info("Password changed for user: %s", user_id)
        return UserProfileDTO.from_user(saved)

    async def _load(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _conflict_for(field: str | None) -> UserConflictError:
        if field == "email":
            return UserConflictError.email_taken()
        if field == "username":
            return UserConflictError.username_taken()
        return UserConflictError()
