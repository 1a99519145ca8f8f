"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from authify.domain.shared.time import utc_now
from authify.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds identity (id, username, email) and the password hash. The hash is
    never part of any public projection; only application services read it.
    """

    def __init__(
        self,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if not username:
            msg = "Username cannot be empty"
            raise ValueError(msg)
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise ValueError(msg)

        self._username = username
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = email if isinstance(email, Email) else Email(email)
        self._updated_at = utc_now()

    def change_username(self, username: str) -> None:
        if not username:
            msg = "Username cannot be empty"
            raise ValueError(msg)
        self._username = username
        self._updated_at = utc_now()

    def change_password_hash(self, password_hash: str) -> None:
        if not password_hash:
            msg = "Password hash cannot be empty"
            raise ValueError(msg)
        self._password_hash = password_hash
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        username: str,
        email: Union[str, Email],
        password_hash: str,
    ) -> "User":
        return cls(username=username, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        username: str,
        email: Union[str, Email],
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            username=username,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, username={self._username}, email={self.email})"
