"""Query to list registered users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nexaboard_identity.domain.user import UserRole

if TYPE_CHECKING:
    from nexaboard_identity.domain.user import User, UserRepository

LEADER_ROLES = (UserRole.MANAGER, UserRole.ADMIN)


class ListUsersQuery:
    """List all users, or only those who can lead a project."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, leaders_only: bool = False) -> list[User]:
        if leaders_only:
            return await self._user_repo.list_by_roles(LEADER_ROLES)
        return await self._user_repo.list_all()
