"""Auth services - JWT and password hashing."""

from authify_auth.services.jwt_service import JWTService
from authify_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
