"""SQLAlchemy persistence for the user domain."""

from authify.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from authify.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
