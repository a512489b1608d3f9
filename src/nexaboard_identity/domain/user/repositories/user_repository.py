"""User repository interface (the credential store)."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union
from uuid import UUID

from nexaboard_identity.domain.user.aggregates.user import User
from nexaboard_identity.domain.user.value_objects import Email, UserRole


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier (UUID4)

        Returns
        -------
        User if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Parameters
        ----------
        email
            The user's email address (string or Email value object)

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        """
        Check if a user exists with the given email.

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Save or update a user.

        Raises
        ------
        EmailAlreadyExistsError
            If the unique index on email rejects the write
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> None:
        """Delete a user by ID. Missing users are ignored."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored users."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return all users ordered by creation time."""

    @abstractmethod
    async def list_by_roles(self, roles: Iterable[UserRole]) -> list[User]:
        """Return users holding any of the given roles."""
