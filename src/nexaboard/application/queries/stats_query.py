"""Headline counts for the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nexaboard.domain.message import MessageRepository
    from nexaboard.domain.project import ProjectRepository
    from nexaboard_identity.domain.user import UserRepository


@dataclass(frozen=True)
class BoardStats:
    projects: int
    members: int
    messages: int


class StatsQuery:
    """Count projects, registered users and feed messages."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
        message_repository: MessageRepository,
    ):
        self._project_repo = project_repository
        self._user_repo = user_repository
        self._message_repo = message_repository

    async def execute(self) -> BoardStats:
        return BoardStats(
            projects=await self._project_repo.count(),
            members=await self._user_repo.count(),
            messages=await self._message_repo.count(),
        )
