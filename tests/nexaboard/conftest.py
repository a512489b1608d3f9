"""
Pytest configuration for nexaboard board-domain tests.
"""

import pytest

from nexaboard_identity import User, UserRole


@pytest.fixture
def manager() -> User:
    return User.create(
        "mona@example.com",
        name="Mona Manager",
        password_hash="unused",
        role=UserRole.MANAGER,
    )


@pytest.fixture
def member() -> User:
    return User.create("mel@example.com", name="Mel Member", password_hash="unused")
