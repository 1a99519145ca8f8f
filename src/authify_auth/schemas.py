"""Auth schemas and data structures.

These are simple data classes used for transferring token data and
token configuration between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class JWTConfig:
    """Signing configuration handed to JWTService at construction.

    Attributes
    ----------
    secret_key
        HMAC secret used to sign and verify tokens
    access_token_expire_hours
        Lifetime of an access token, in hours
    algorithm
        JWS algorithm name
    """

    secret_key: str
    access_token_expire_hours: int = 1
    algorithm: str = "HS256"


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the claims extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user (``sub`` claim)
    username
        The user's username at the time the token was issued
    email
        The user's email address at the time the token was issued
    issued_at
        Token issue timestamp
    exp
        Token expiration timestamp
    """

    user_id: UUID
    username: str
    email: str
    issued_at: datetime
    exp: datetime
