"""Application layer services."""

from authify.application.services.authentication_service import (
    AuthenticationService,
)
from authify.application.services.profile_service import ProfileService

__all__ = [
    "AuthenticationService",
    "ProfileService",
]
