"""Integration tests for authentication endpoints."""

import sqlite3

import jwt
import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestAuthRegister:
    """Tests for POST /auth/register."""

    def test_register_success(self, test_client: TestClient):
        """Successfully register a new user."""
        response = test_client.post(
            "/auth/register",
            json={
                "username": "newuser",
                "email": "newuser@example.com",
                "password": "SecurePassword123!",
            },
        )

        assert response.status_code == 201
        data = response.json()

        assert data["message"] == "Registration successful"
        assert data["status"] == 201
        assert data["user"]["username"] == "newuser"
        assert data["user"]["email"] == "newuser@example.com"
        assert "id" in data["user"]
        assert "created_at" in data["user"]
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

        # Registration does not log in
        assert "accessToken" not in data
        assert "accessToken" not in response.cookies

    def test_register_duplicate_email(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
    ):
        response = test_client.post(
            "/auth/register",
            json={**registered_user_data, "username": "bob"},
        )

        assert response.status_code == 409
        assert response.json() == {
            "detail": "A user with this email or username already exists",
            "code": "USER_ALREADY_EXISTS",
        }

    def test_register_duplicate_username(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
    ):
        response = test_client.post(
            "/auth/register",
            json={**registered_user_data, "email": "other@x.com"},
        )

        assert response.status_code == 409
        assert (
            response.json()["detail"]
            == "A user with this email or username already exists"
        )

    def test_register_after_conflict_still_works(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
    ):
        """A failed insert leaves the session usable for later requests."""
        test_client.post(
            "/auth/register",
            json={**registered_user_data, "username": "bob"},
        )

        response = test_client.post(
            "/auth/register",
            json={"username": "bob", "email": "bob@x.com", "password": "Passw0rd"},
        )

        assert response.status_code == 201

    def test_register_short_password(self, test_client: TestClient):
        response = test_client.post(
            "/auth/register",
            json={"username": "bob", "email": "bob@x.com", "password": "short"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_register_multibyte_password_over_byte_limit(
        self,
        test_client: TestClient,
    ):
        # 40 characters fit the schema but encode to 80 bytes
        response = test_client.post(
            "/auth/register",
            json={"username": "bob", "email": "bob@x.com", "password": "ä" * 40},
        )

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Password cannot exceed 72 bytes",
            "code": "WEAK_PASSWORD",
        }

    def test_register_invalid_email(self, test_client: TestClient):
        response = test_client.post(
            "/auth/register",
            json={"username": "bob", "email": "not-an-email", "password": "Passw0rd"},
        )

        assert response.status_code == 400

    @pytest.mark.parametrize("missing", ["username", "email", "password"])
    def test_register_missing_field(self, test_client: TestClient, missing: str):
        body = {"username": "bob", "email": "bob@x.com", "password": "Passw0rd"}
        del body[missing]

        response = test_client.post("/auth/register", json=body)

        assert response.status_code == 400
        assert missing in response.json()["detail"]


class TestAuthLogin:
    """Tests for POST /auth/login."""

    def test_login_success(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
        jwt_secret: str,
    ):
        response = test_client.post(
            "/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["status"] == 201

        claims = jwt.decode(data["accessToken"], jwt_secret, algorithms=["HS256"])
        assert claims["sub"] == registered_user["id"]
        assert claims["username"] == "alice"
        assert claims["email"] == "alice@x.com"
        assert claims["exp"] - claims["iat"] == 3600

    def test_login_sets_http_only_cookie(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
    ):
        response = test_client.post(
            "/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )

        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("accessToken=")
        assert "HttpOnly" in set_cookie
        assert "Max-Age=3600" in set_cookie
        assert "Path=/" in set_cookie
        assert response.cookies["accessToken"] == response.json()["accessToken"]

    def test_login_wrong_password(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
    ):
        response = test_client.post(
            "/auth/login",
            json={"email": registered_user_data["email"], "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json() == {
            "detail": "Invalid email or password",
            "code": "INVALID_CREDENTIALS",
        }
        assert "accessToken" not in response.cookies

    def test_login_unknown_email_matches_wrong_password(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
    ):
        unknown = test_client.post(
            "/auth/login",
            json={"email": "nobody@x.com", "password": "Passw0rd"},
        )
        wrong = test_client.post(
            "/auth/login",
            json={"email": registered_user_data["email"], "password": "wrong"},
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_login_email_is_case_insensitive(
        self,
        test_client: TestClient,
        registered_user,
    ):
        response = test_client.post(
            "/auth/login",
            json={"email": "ALICE@x.com", "password": "Passw0rd"},
        )

        assert response.status_code == 201

    def test_login_persists_upgraded_hash(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
        api_settings,
        tmp_path,
    ):
        api_settings.password_hash_rounds = 5

        response = test_client.post(
            "/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )
        assert response.status_code == 201

        with sqlite3.connect(tmp_path / "test.db") as conn:
            (stored,) = conn.execute(
                "SELECT password_hash FROM users WHERE username = ?",
                (registered_user["username"],),
            ).fetchone()
        assert stored.split("$")[2] == "05"

    def test_login_missing_password(self, test_client: TestClient):
        response = test_client.post("/auth/login", json={"email": "alice@x.com"})
        assert response.status_code == 400


class TestAuthLogout:
    """Tests for POST /auth/logout."""

    def test_logout_clears_cookie(
        self,
        test_client: TestClient,
        registered_user,
        registered_user_data: dict,
    ):
        test_client.post(
            "/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )
        assert "accessToken" in test_client.cookies

        response = test_client.post("/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logout successful", "status": 200}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith("accessToken=")
        assert "Max-Age=0" in set_cookie
        assert "accessToken" not in test_client.cookies

    def test_logout_without_session(self, test_client: TestClient):
        response = test_client.post("/auth/logout")
        assert response.status_code == 200


class TestInfoEndpoints:
    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"

    def test_root(self, test_client: TestClient):
        response = test_client.get("/")

        assert response.status_code == 200
        assert response.json()["endpoints"]["users"] == "/users"

    def test_docs_enabled_in_debug(self, test_client: TestClient):
        assert test_client.get("/openapi.json").status_code == 200
