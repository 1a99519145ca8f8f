"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from authify.domain.user.aggregates.user import User
from authify.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Implementations must enforce uniqueness of email and username
    atomically and report a violation by raising UniquenessViolationError
    from ``create`` or ``update``.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""

    @abstractmethod
    async def find_by_email_excluding(
        self,
        email: Union[str, Email],
        user_id: UUID,
    ) -> Optional[User]:
        """Find a user other than ``user_id`` holding this email."""

    @abstractmethod
    async def find_by_username_excluding(
        self,
        username: str,
        user_id: UUID,
    ) -> Optional[User]:
        """Find a user other than ``user_id`` holding this username."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user and return the stored record."""

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist changes to an existing user and return the stored record."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
