"""In-memory implementation of UserRepository.

Useful for tests and local tooling. Records are stored as copies so that
callers mutating a returned User never change stored state without
``update``.
"""

import asyncio
import logging
from typing import Optional, Union
from uuid import UUID

from authify.domain.user import (
    Email,
    UniquenessViolationError,
    User,
    UserRepository,
)

logger = logging.getLogger(__name__)


def _copy(user: User) -> User:
    return User.reconstitute(
        id=user.id,
        username=user.username,
        email=user.email,
        password_hash=user.password_hash,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class InMemoryUserRepository(UserRepository):
    """Dict-backed UserRepository with atomic uniqueness checks."""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        user = self._users.get(user_id)
        return _copy(user) if user is not None else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        return self._first(lambda u: u.email == email_value)

    async def find_by_username(self, username: str) -> Optional[User]:
        return self._first(lambda u: u.username == username)

    async def find_by_email_excluding(
        self,
        email: Union[str, Email],
        user_id: UUID,
    ) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value
        return self._first(lambda u: u.email == email_value and u.id != user_id)

    async def find_by_username_excluding(
        self,
        username: str,
        user_id: UUID,
    ) -> Optional[User]:
        return self._first(lambda u: u.username == username and u.id != user_id)

    async def create(self, user: User) -> User:
        async with self._lock:
            self._check_unique(user)
            self._users[user.id] = _copy(user)
        logger.debug("Created user: %s", user.id)
        return _copy(user)

    async def update(self, user: User) -> User:
        async with self._lock:
            if user.id not in self._users:
                msg = f"Cannot update missing user: {user.id}"
                raise LookupError(msg)
            self._check_unique(user)
            self._users[user.id] = _copy(user)
        logger.debug("Updated user: %s", user.id)
        return _copy(user)

    async def count(self) -> int:
        return len(self._users)

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.email == user.email:
                raise UniquenessViolationError("email")
            if other.username == user.username:
                raise UniquenessViolationError("username")

    def _first(self, predicate) -> Optional[User]:
        for user in self._users.values():
            if predicate(user):
                return _copy(user)
        return None
