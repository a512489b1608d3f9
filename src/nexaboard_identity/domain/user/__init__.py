"""User domain manages user identity only.

This domain handles:
- User aggregate (identity: id, email, name, password hash, role)
- Role normalization
- The credential store interface
"""

from nexaboard_identity.domain.user.aggregates import User
from nexaboard_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from nexaboard_identity.domain.user.repositories import UserRepository
from nexaboard_identity.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
