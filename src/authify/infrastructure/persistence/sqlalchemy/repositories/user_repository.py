"""SQLAlchemy implementation of UserRepository."""

import logging
import re
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from authify.domain.shared.time import ensure_tz_aware
from authify.domain.user import (
    Email,
    UniquenessViolationError,
    User,
    UserRepository,
)
from authify.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Matches the column in SQLite ("users.email") and PostgreSQL
# ("ix_users_email", "Key (email)=...") unique violation messages.
_UNIQUE_FIELD_PATTERN = re.compile(
    r"users\.(email|username)|users_(email|username)|\((email|username)\)",
)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Writes are flushed, not committed; the caller owns the transaction and
    must roll back after a UniquenessViolationError.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        # Normalize email for lookup
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        return await self._find_one(stmt)

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username)
        return await self._find_one(stmt)

    async def find_by_email_excluding(
        self,
        email: Union[str, Email],
        user_id: UUID,
    ) -> Optional[User]:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(
            UserModel.email == email_value,
            UserModel.id != user_id,
        )
        return await self._find_one(stmt)

    async def find_by_username_excluding(
        self,
        username: str,
        user_id: UUID,
    ) -> Optional[User]:
        stmt = select(UserModel).where(
            UserModel.username == username,
            UserModel.id != user_id,
        )
        return await self._find_one(stmt)

    async def create(self, user: User) -> User:
        model = self._map_to_model(user)
        self._session.add(model)

        await self._flush()
        logger.info("Created user: %s (username: %s)", user.id, user.username)
        return self._map_to_domain(model)

    async def update(self, user: User) -> User:
        model = await self._find_model_by_id(user.id)
        if model is None:
            msg = f"Cannot update missing user: {user.id}"
            raise LookupError(msg)

        # id and created_at never change
        model.username = user.username
        model.email = user.email
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at

        await self._flush()
        logger.debug("Updated user: %s", user.id)
        return self._map_to_domain(model)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _flush(self) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            message = str(e.orig if e.orig is not None else e)
            if "UNIQUE constraint failed" in message or "unique" in message.lower():
                raise UniquenessViolationError(_violated_field(message)) from e
            raise

    async def _find_one(self, stmt) -> Optional[User]:
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def _find_model_by_id(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


def _violated_field(message: str) -> str | None:
    match = _UNIQUE_FIELD_PATTERN.search(message)
    if match is None:
        return None
    return next(group for group in match.groups() if group)
