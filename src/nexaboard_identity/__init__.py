"""Nexaboard Identity - users, authentication and access control.

This package handles all identity-related concerns:
- User records and roles
- Authentication (registration, login, tokens, the auth cookie)
- Authorization (per-route access policies)

The board domain (projects, tasks, messages) only references user ids and
the principal handed to it by the API layer.
"""

from nexaboard_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from nexaboard_identity.exceptions import (
    AuthError,
    ForbiddenError,
    InvalidCredentialsError,
    InvalidTokenError,
    UnauthenticatedError,
    WeakPasswordError,
)
from nexaboard_identity.schemas import AuthCookie, TokenPayload
from nexaboard_identity.services import PasswordHashingService, TokenService
from nexaboard_identity.application import (
    AccessPolicy,
    AuthenticatedOnly,
    AuthenticationService,
    Public,
    RoleIn,
    authorize,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    # Exceptions
    "AuthError",
    "ForbiddenError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "UnauthenticatedError",
    "WeakPasswordError",
    # Schemas
    "AuthCookie",
    "TokenPayload",
    # Services
    "PasswordHashingService",
    "TokenService",
    # Application
    "AccessPolicy",
    "AuthenticatedOnly",
    "AuthenticationService",
    "Public",
    "RoleIn",
    "authorize",
]
