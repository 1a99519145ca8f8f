"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, in-memory store)
    │   ├── application/
    │   ├── authify_auth/
    │   ├── authify_config/
    │   ├── domain/
    │   ├── infrastructure/
    │   └── presentation/
    └── integration/       # SQLAlchemy on in-memory SQLite, API via TestClient
        ├── api/
        └── persistence/
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from authify_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that touch a real database engine (in-memory SQLite)",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
