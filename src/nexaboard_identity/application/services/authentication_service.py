"""Authentication service for user registration and login."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nexaboard_identity.domain.user import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserRole,
)
from nexaboard_identity.exceptions import InvalidCredentialsError

if TYPE_CHECKING:
    from nexaboard_identity.domain.user import UserRepository
    from nexaboard_identity.services import PasswordHashingService, TokenService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the credential store, password hashing and token issuance:
    - User registration
    - Login with password

    Both operations return the user together with a freshly issued token.
    Turning the user into a response shape is the caller's job.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        token_service: TokenService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._token_service = token_service

    async def register(
        self,
        email: str,
        password: str,
        name: str,
        role: str | UserRole | None = None,
    ) -> tuple[User, str]:
        # Fast path only; the unique index on users.email is authoritative
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        user_role = UserRole.parse(role)
        password_hash = self._password_service.hash(password)
        user = User.create(
            email,
            name=name,
            password_hash=password_hash,
            role=user_role,
        )
        await self._user_repo.save(user)

        token = self._token_service.issue(user)

        logger.info("User registered: %s (role: %s)", user.email, user_role.value)
        return user, token

    async def login(
        self,
        email: str,
        password: str,
    ) -> tuple[User, str]:
        try:
            user = await self._user_repo.find_by_email(email)
        except InvalidEmailError:
            user = None

        if user is None:
            # Spend the same bcrypt cost as a real check
            self._password_service.verify(password, self._password_service.dummy_hash)
            raise InvalidCredentialsError

        if not self._password_service.verify(password, user.password_hash):
            raise InvalidCredentialsError

        token = self._token_service.issue(user)

        logger.info("User logged in: %s", user.email)
        return user, token
