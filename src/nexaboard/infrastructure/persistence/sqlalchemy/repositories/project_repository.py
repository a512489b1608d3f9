"""SQLAlchemy implementation of ProjectRepository."""

import logging
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nexaboard.domain.project import Project, ProjectRepository
from nexaboard.infrastructure.persistence.sqlalchemy.models import (
    ProjectMemberModel,
    ProjectModel,
)

logger = logging.getLogger(__name__)


class ProjectRepositorySQLAlchemy(ProjectRepository):
    """SQLAlchemy implementation of ProjectRepository.

    Team membership lives in ``project_members``; the member rows are
    kept in step with ``Project.team_ids`` on every save.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, project_id: UUID) -> Project | None:
        model = await self._find_model_by_id(project_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_all(self) -> list[Project]:
        stmt = select(ProjectModel).order_by(ProjectModel.created_at)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_manager(self, manager_id: UUID) -> list[Project]:
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.manager_id == manager_id)
            .order_by(ProjectModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_team_member(self, user_id: UUID) -> list[Project]:
        stmt = (
            select(ProjectModel)
            .join(ProjectMemberModel)
            .where(ProjectMemberModel.user_id == user_id)
            .order_by(ProjectModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().unique().all()]

    async def save(self, project: Project) -> None:
        existing = await self._find_model_by_id(project.id)

        if existing is not None:
            self._update_model(existing, project)
            logger.debug("Updated project: %s", project.id)
        else:
            self._session.add(self._map_to_model(project))
            logger.info("Created project: %s (%s)", project.id, project.name)

        await self._session.flush()

    async def delete(self, project_id: UUID) -> bool:
        model = await self._find_model_by_id(project_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted project: %s", project_id)
        return True

    async def count(self) -> int:
        stmt = select(func.count()).select_from(ProjectModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, project_id: UUID) -> ProjectModel | None:
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            name=model.name,
            description=model.description,
            total_progress=model.total_progress,
            status=model.status,
            manager_id=model.manager_id,
            manager_name=model.manager_name,
            team_ids=[member.user_id for member in model.members],
            deadline=model.deadline,
            created_at=model.created_at,
        )

    def _map_to_model(self, project: Project) -> ProjectModel:
        return ProjectModel(
            id=project.id,
            name=project.name,
            description=project.description,
            total_progress=project.total_progress,
            status=project.status,
            manager_id=project.manager_id,
            manager_name=project.manager_name,
            deadline=project.deadline,
            created_at=project.created_at,
            members=self._map_members(project),
        )

    def _update_model(self, model: ProjectModel, project: Project) -> None:
        model.name = project.name
        model.description = project.description
        model.total_progress = project.total_progress
        model.status = project.status
        model.manager_id = project.manager_id
        model.manager_name = project.manager_name
        model.deadline = project.deadline

        existing = {member.user_id: member for member in model.members}
        members = []
        for position, user_id in enumerate(dict.fromkeys(project.team_ids)):
            member = existing.get(user_id)
            if member is None:
                member = ProjectMemberModel(user_id=user_id)
            member.position = position
            members.append(member)
        model.members = members

    @staticmethod
    def _map_members(project: Project) -> list[ProjectMemberModel]:
        # dict.fromkeys drops duplicated ids and keeps their first position
        return [
            ProjectMemberModel(user_id=user_id, position=position)
            for position, user_id in enumerate(dict.fromkeys(project.team_ids))
        ]
