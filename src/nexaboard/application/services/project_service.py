"""Project management use cases."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING
from uuid import UUID

from nexaboard.domain.project import Project, ProjectNotFoundError
from nexaboard_identity.domain.user import UserNotFoundError

if TYPE_CHECKING:
    from nexaboard.domain.project import ProjectRepository
    from nexaboard_identity.domain.user import UserRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """Create, look up and delete projects."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        user_repository: UserRepository,
    ):
        self._project_repo = project_repository
        self._user_repo = user_repository

    async def create(
        self,
        name: str,
        manager_id: UUID,
        deadline: date | None = None,
    ) -> Project:
        """Create a project led by an existing user.

        The project starts with the default description, status "In
        Progress", zero progress and an empty team.

        Raises
        ------
        UserNotFoundError
            If ``manager_id`` does not belong to a user
        """
        manager = await self._user_repo.find_by_id(manager_id)
        if manager is None:
            raise UserNotFoundError(str(manager_id))

        project = Project.create(
            name=name,
            manager_id=manager.id,
            manager_name=manager.name,
            deadline=deadline,
        )
        await self._project_repo.save(project)

        logger.info("Project created: %s (manager: %s)", project.id, manager.email)
        return project

    async def list_all(self) -> list[Project]:
        return await self._project_repo.find_all()

    async def list_for_user(self, user_id: UUID) -> list[Project]:
        """Projects the user manages, then those they are a team member of.

        A project that matches both ways is listed once.
        """
        managed = await self._project_repo.find_by_manager(user_id)
        member_of = await self._project_repo.find_by_team_member(user_id)

        seen = {project.id for project in managed}
        projects = list(managed)
        for project in member_of:
            if project.id not in seen:
                seen.add(project.id)
                projects.append(project)
        return projects

    async def get(self, project_id: UUID) -> Project:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(str(project_id))
        return project

    async def delete(self, project_id: UUID) -> None:
        # Deleting an unknown id is a no-op
        if await self._project_repo.delete(project_id):
            logger.info("Project deleted: %s", project_id)
