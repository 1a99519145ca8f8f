"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from authify_auth.exceptions import InvalidTokenError
from authify_auth.schemas import JWTConfig
from authify_auth.services import JWTService

SECRET = "test-secret-key-12345"
FAR_FUTURE = {"iat": 0, "exp": 4102444800}  # 2100-01-01


def _encode(claims: dict) -> str:
    return jwt.encode(claims, SECRET, algorithm="HS256")


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_valid_secret(self):
        service = JWTService(JWTConfig(secret_key="test-secret-key"))
        assert service.access_token_lifetime == timedelta(hours=1)

    def test_init_with_empty_secret_raises(self):
        """Test that empty secret raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(JWTConfig(secret_key=""))

    def test_init_with_custom_expiry(self):
        service = JWTService(
            JWTConfig(secret_key="test-secret", access_token_expire_hours=2),
        )
        assert service.access_token_lifetime == timedelta(hours=2)


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(JWTConfig(secret_key=SECRET))
        self.user_id = uuid4()
        self.username = "alice"
        self.email = "alice@example.com"

    def _token(self, **kwargs) -> str:
        return self.service.create_access_token(
            user_id=self.user_id,
            username=self.username,
            email=self.email,
            **kwargs,
        )

    def test_create_access_token(self):
        token = self._token()

        assert isinstance(token, str)
        assert token.count(".") == 2

    def test_verify_valid_access_token(self):
        """Test that valid access token is verified correctly."""
        payload = self.service.verify_token(self._token())

        assert payload.user_id == self.user_id
        assert payload.username == self.username
        assert payload.email == self.email

    def test_token_claims_and_one_hour_lifetime(self):
        """The raw claims carry sub, username, email and a one-hour window."""
        claims = jwt.decode(
            self._token(),
            SECRET,
            algorithms=["HS256"],
        )

        assert claims["sub"] == str(self.user_id)
        assert claims["username"] == "alice"
        assert claims["email"] == "alice@example.com"
        assert claims["exp"] - claims["iat"] == 3600

    def test_token_header_uses_hs256(self):
        header = jwt.get_unverified_header(self._token())
        assert header["alg"] == "HS256"

    def test_verify_expired_token_raises(self):
        """Test that expired token raises InvalidTokenError."""
        token = self._token(expires_delta=timedelta(seconds=-1))

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_verify_token_from_other_secret_raises(self):
        other = JWTService(JWTConfig(secret_key="a-different-secret"))
        token = other.create_access_token(self.user_id, "alice", self.email)

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)

    def test_verify_tampered_token_raises(self):
        header, payload, signature = self._token().split(".")
        tampered_signature = ("A" if signature[0] != "A" else "B") + signature[1:]
        tampered = ".".join([header, payload, tampered_signature])

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(tampered)

    def test_verify_garbage_raises(self):
        with pytest.raises(InvalidTokenError, match="Invalid token"):
            self.service.verify_token("not-a-jwt")

    def test_verify_token_with_non_uuid_subject_raises(self):
        token = _encode(
            {"sub": "42", "username": "x", "email": "x@example.com", **FAR_FUTURE},
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_verify_token_missing_username_raises(self):
        token = _encode({"sub": str(self.user_id), "email": self.email, **FAR_FUTURE})

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify_token(token)

    def test_verify_token_missing_exp_raises(self):
        token = _encode(
            {"sub": str(self.user_id), "username": "alice", "email": self.email, "iat": 0},
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)
