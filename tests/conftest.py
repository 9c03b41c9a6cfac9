"""Pytest configuration and shared fixtures.

Organization:
    - Settings Fixtures: cache isolation between tests
    - Data Fixtures: ordered user sequences
"""

from __future__ import annotations

import pytest

from user_directory.core.settings import clear_all_caches
from user_directory.features.users.schemas import UserResponse


def make_user(user_id: int) -> UserResponse:
    """Build a user the way the demo data set names them."""
    return UserResponse(
        id=user_id,
        name=f"name_{user_id}",
        email=f"{user_id}@email.com",
        avatar=f"avatar_{user_id}",
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings and PAGINATION_/LOG_ overrides around each test."""
    for name in ("PAGINATION_CURSOR_PREFIX", "PAGINATION_MAX_LIMIT", "LOG_LEVEL", "LOG_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Data Fixtures
# ============================================================================


@pytest.fixture
def users() -> list[UserResponse]:
    """Ten users with ids 1..10, sorted ascending by id."""
    return [make_user(user_id) for user_id in range(1, 11)]


@pytest.fixture
def user_dicts() -> list[dict]:
    """Ten plain mapping records with ids 1..10."""
    return [{"id": user_id, "name": f"name_{user_id}"} for user_id in range(1, 11)]
