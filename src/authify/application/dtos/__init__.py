"""Data Transfer Objects for presentation layer.

DTOs decouple the presentation layer from domain models,
providing stable interfaces for API endpoints and the CLI.
"""

from authify.application.dtos.user_dto import LoginResult, UserProfileDTO

__all__ = [
    "LoginResult",
    "UserProfileDTO",
]
