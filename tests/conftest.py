"""Root test fixtures shared across all test types.

Integration fixtures (database engine, HTTP client) are in
tests/integration/conftest.py.
"""

import os

# Settings are read from the environment on first use; set required values
# before any app import.
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest

from src.projectree.core.config import get_settings
from tests.utils import FakeTreeCollection

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def tree_collection() -> FakeTreeCollection:
    """Empty in-memory tree collection."""
    return FakeTreeCollection()
