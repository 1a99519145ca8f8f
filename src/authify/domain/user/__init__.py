"""User domain manages user identity and credentials.

This domain handles:
- User aggregate (id, username, email, password hash)
- Email value object (validation, normalization)
- Repository interface with uniqueness guarantees
"""

from authify.domain.user.exceptions import (
    EMAIL_TAKEN_MESSAGE,
    USER_ALREADY_EXISTS_MESSAGE,
    USERNAME_TAKEN_MESSAGE,
    InvalidCurrentPasswordError,
    InvalidEmailError,
    NoChangesError,
    UniquenessViolationError,
    UserConflictError,
    UserNotFoundError,
)
from authify.domain.user.value_objects import Email
from authify.domain.user.aggregates import User
from authify.domain.user.repositories import UserRepository

__all__ = [
    "EMAIL_TAKEN_MESSAGE",
    "USERNAME_TAKEN_MESSAGE",
    "USER_ALREADY_EXISTS_MESSAGE",
    "Email",
    "InvalidCurrentPasswordError",
    "InvalidEmailError",
    "NoChangesError",
    "UniquenessViolationError",
    "User",
    "UserConflictError",
    "UserNotFoundError",
    "UserRepository",
]
