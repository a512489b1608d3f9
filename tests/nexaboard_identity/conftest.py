"""
Pytest configuration for nexaboard_identity tests.

Fixtures for users, fast password hashing and a token service on a fixed
clock.
"""

from datetime import datetime, timedelta, timezone

import pytest

from nexaboard_identity import PasswordHashingService, TokenService, User, UserRole

FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
TEST_SECRET = "test-secret-key-12345"


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Hashing service with the minimum bcrypt cost (fast tests)."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def test_user() -> User:
    """Create a standard member."""
    return User.create("alice@example.com", name="Alice", password_hash="unused")


@pytest.fixture
def manager_user() -> User:
    return User.create(
        "mona@example.com",
        name="Mona",
        password_hash="unused",
        role=UserRole.MANAGER,
    )


@pytest.fixture
def admin_user() -> User:
    return User.create(
        "root@example.com",
        name="Root",
        password_hash="unused",
        role=UserRole.ADMIN,
    )


@pytest.fixture
def token_service() -> TokenService:
    """Token service whose clock is frozen at FIXED_NOW."""
    return TokenService(
        secret_key=TEST_SECRET,
        ttl=timedelta(hours=1),
        clock=lambda: FIXED_NOW,
    )
