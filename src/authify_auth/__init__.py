"""Authify Auth - Generic credential infrastructure.

This package provides authentication infrastructure that is independent
of the user domain. It handles:
- Password hashing (bcrypt)
- JWT token creation and verification

Architecture:
    authify_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes (token payload, JWT config)
    └── exceptions.py       # Auth exceptions

Usage:
    from authify_auth import JWTConfig, JWTService, PasswordHashingService
"""

from authify_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)
from authify_auth.schemas import JWTConfig, TokenPayload
from authify_auth.services import JWTService, PasswordHashingService

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    # Schemas
    "JWTConfig",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "WeakPasswordError",
    "InvalidCredentialsError",
]
