"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. AUTHIFY_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Fallback signing secret used when JWT_SECRET is unset. Insecure: the API
# logs a warning at startup while it is in use.
DEFAULT_JWT_SECRET = "jwtsecret"  # NOQA: S105


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / "pyproject.toml").is_file():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. AUTHIFY_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("AUTHIFY_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Authify"
    debug: bool = False

    # JWT
    jwt_secret: SecretStr = SecretStr(DEFAULT_JWT_SECRET)
    jwt_access_token_expire_hours: int = 1

    # Password hashing (bcrypt work factor)
    password_hash_rounds: int = 10

    # Database (POSTGRES_ prefix, or a full DB_URL)
    db_url: str = ""  # Full SQLAlchemy URL, overrides the POSTGRES_ fields
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("postgres")
    postgres_db: str = "authify"

    # API
    backend_host: str = "0.0.0.0"  # NOQA: S104
    backend_port: int = 8000
    frontend_port: int = 3000
    api_debug: bool = False
    api_cors_origins: str = ""  # Empty = the local frontend only
    api_cookie_secure: bool = True
    api_cookie_samesite: Literal["lax", "strict", "none"] = "lax"

    # Logging
    log_level: str = "INFO"

    @field_validator("jwt_secret", mode="before")
    @classmethod
    def _blank_secret_means_default(cls, value: object) -> object:
        """An empty JWT_SECRET (as in the shipped .env example) counts as unset."""
        raw = value.get_secret_value() if isinstance(value, SecretStr) else value
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return SecretStr(DEFAULT_JWT_SECRET)
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Explicit DB_URL, or a PostgreSQL URL built from components."""
        if self.db_url:
            return self.db_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins, defaulting to the frontend on localhost."""
        origins = [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]
        return origins or [f"http://localhost:{self.frontend_port}"]

    @property
    def uses_default_jwt_secret(self) -> bool:
        """True when tokens are signed with the built-in fallback secret."""
        return self.jwt_secret.get_secret_value() == DEFAULT_JWT_SECRET


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
