"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from authify_auth.exceptions import InvalidTokenError
from authify_auth.schemas import JWTConfig, TokenPayload


class JWTService:
    """Service for JWT access token creation and verification.

    Tokens carry the user's id (``sub``), username and email, and expire
    after a fixed lifetime. There is no refresh or revocation: expiry is
    the only way a token stops being valid.

    Examples
    --------
    >>> service = JWTService(JWTConfig(secret_key="your-secret-key"))
    >>> token = service.create_access_token(user_id, "alice", "alice@x.com")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    def __init__(self, config: JWTConfig):
        """Initialize the JWT service.

        Parameters
        ----------
        config
            Signing secret, token lifetime and algorithm.
        """
        if not config.secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = config.secret_key
        self._algorithm = config.algorithm
        self._access_expire = timedelta(hours=config.access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        user_id: UUID,
        username: str,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token.

        Parameters
        ----------
        user_id
            The user's unique identifier
        username
            The user's username
        email
            The user's email address
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._access_expire)

        payload = {
            "sub": str(user_id),
            "username": username,
            "email": email,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                username=payload["username"],
                email=payload["email"],
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
