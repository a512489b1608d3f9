"""User aggregate for identity concerns only."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from nexaboard.domain.shared.time import utc_now
from nexaboard_identity.domain.user.value_objects import Email, UserRole


class User:
    """
    User aggregate root.

    Holds the login identity (email), display name, role and the bcrypt hash
    of the password. The hash is only read by the authentication service;
    response mappers never copy it.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: str,
        password_hash: str,
        role: Union[str, UserRole] = UserRole.MEMBER,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._name = name
        self._password_hash = password_hash
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_role(self, *roles: UserRole) -> bool:
        return self._role in roles

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        name: str,
        password_hash: str,
        role: UserRole = UserRole.MEMBER,
    ) -> "User":
        return cls(email=email, name=name, password_hash=password_hash, role=role)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str,
        password_hash: str,
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password_hash=password_hash,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value}, role={self._role.value})"
