"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from authify.application.dtos import LoginResult, UserProfileDTO
from authify.domain.user import (
    Email,
    InvalidEmailError,
    UniquenessViolationError,
    User,
    UserConflictError,
)
from authify_auth import (
    InvalidCredentialsError,
    JWTService,
    PasswordHashingService,
    TokenPayload,
    WeakPasswordError,
)

if TYPE_CHECKING:
    from authify.domain.user import UserRepository

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates authify_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with email and password, upgrading outdated password hashes
    - Token verification for the request guard

    Holds no state between calls beyond its collaborators.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(
        self,
        username: str,
        email: str,
        password: str,
    ) -> UserProfileDTO:
        password_hash = self._password_service.hash(password)
        user = User.create(username=username, email=email, password_hash=password_hash)

        # Uniqueness is the store's job; a duplicate surfaces as a violation
        try:
            saved = await self._user_repo.create(user)
        except UniquenessViolationError as e:
            logger.info("Registration rejected, duplicate %s", e.field or "field")
            raise UserConflictError from e

        logger.info("User registered: %s (%s)", saved.username, saved.id)
        return UserProfileDTO.from_user(saved)

    async def login(
        self,
        email: str,
        password: str,
    ) -> LoginResult:
        user = await self._find_by_email(email)

        # Same error for unknown email and wrong password
        if user is None or not self._password_service.verify(
            password,
            user.password_hash,
        ):
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(user.password_hash):
            user = await self._rehash(user, password)

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            username=user.username,
            email=user.email,
        )

        logger.info("User logged in: %s", user.id)
        return LoginResult(
            access_token=access_token,
            user=UserProfileDTO.from_user(user),
        )

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)

    async def _rehash(self, user: User, password: str) -> User:
        # Upgrade the stored hash to the configured bcrypt cost
        try:
            new_hash = self._password_service.hash(password)
        except WeakPasswordError:
            # Legacy password outside today's limits; keep the old hash
            logger.info("Skipping rehash for user %s: legacy password", user.id)
            return user

        user.change_password_hash(new_hash)
        saved = await self._user_repo.update(user)
        logger.info(
            "Rehashed password for user %s (rounds=%s)",
            user.id,
            self._password_service.rounds,
        )
        return saved

    async def _find_by_email(self, email: str) -> User | None:
        try:
            email_obj = Email(email)
        except InvalidEmailError:
            return None
        return await self._user_repo.find_by_email(email_obj)
