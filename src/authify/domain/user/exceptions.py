"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from authify.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

USER_ALREADY_EXISTS_MESSAGE = "A user with this email or username already exists"
EMAIL_TAKEN_MESSAGE = "Email already taken"
USERNAME_TAKEN_MESSAGE = "Username already taken"


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class UniquenessViolationError(Exception):
    """Storage-level signal that a write would duplicate a unique value.

    Raised by UserRepository implementations only. Application services
    translate it into a UserConflictError.

    Attributes
    ----------
    field
        ``"email"`` or ``"username"`` when the store can tell which
        constraint fired, otherwise None.
    """

    def __init__(self, field: str | None = None) -> None:
        self.field = field
        detail = f" on {field}" if field else ""
        super().__init__(f"Uniqueness violation{detail}")


class UserConflictError(ConflictError):
    """A unique user field (email or username) is already in use."""

    def __init__(
        self,
        message: str = USER_ALREADY_EXISTS_MESSAGE,
        code: ErrorCode = ErrorCode.USER_ALREADY_EXISTS,
    ) -> None:
        super().__init__(message, code)

    @classmethod
    def email_taken(cls) -> "UserConflictError":
        return cls(EMAIL_TAKEN_MESSAGE, ErrorCode.EMAIL_TAKEN)

    @classmethod
    def username_taken(cls) -> "UserConflictError":
        return cls(USERNAME_TAKEN_MESSAGE, ErrorCode.USERNAME_TAKEN)


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object = None) -> None:
        super().__init__(
            "User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)} if user_id is not None else None,
        )


class NoChangesError(ValidationError):
    """A profile update that would not change anything."""

    def __init__(self) -> None:
        super().__init__("No changes detected", code=ErrorCode.NO_CHANGES)


class InvalidCurrentPasswordError(ValidationError):
    """The current password given for a password change does not match."""

    def __init__(self) -> None:
        super().__init__(
            "Incorrect current password",
            code=ErrorCode.INVALID_CURRENT_PASSWORD,
        )
