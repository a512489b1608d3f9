"""SQLAlchemy implementation of TaskRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from nexaboard.domain.task import Task, TaskPriority, TaskRepository, TaskStatus
from nexaboard.infrastructure.persistence.sqlalchemy.models import TaskModel

logger = logging.getLogger(__name__)


class TaskRepositorySQLAlchemy(TaskRepository):
    """SQLAlchemy implementation of TaskRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, task_id: UUID) -> Task | None:
        model = await self._find_model_by_id(task_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_project(self, project_id: UUID) -> list[Task]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.project_id == project_id)
            .order_by(TaskModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_assignee(self, assignee_id: UUID) -> list[Task]:
        stmt = (
            select(TaskModel)
            .where(TaskModel.assignee_id == assignee_id)
            .order_by(TaskModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def save(self, task: Task) -> None:
        existing = await self._find_model_by_id(task.id)

        if existing is not None:
            self._update_model(existing, task)
            logger.debug("Updated task: %s", task.id)
        else:
            self._session.add(self._map_to_model(task))
            logger.debug("Created task: %s in project %s", task.id, task.project_id)

        await self._session.flush()

    async def delete(self, task_id: UUID) -> bool:
        model = await self._find_model_by_id(task_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _find_model_by_id(self, task_id: UUID) -> TaskModel | None:
        stmt = select(TaskModel).where(TaskModel.id == task_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: TaskModel) -> Task:
        return Task(
            id=model.id,
            project_id=model.project_id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status),
            priority=TaskPriority(model.priority),
            assignee_id=model.assignee_id,
            assignee_name=model.assignee_name,
            due_date=model.due_date,
            created_at=model.created_at,
        )

    def _map_to_model(self, task: Task) -> TaskModel:
        return TaskModel(
            id=task.id,
            project_id=task.project_id,
            title=task.title,
            description=task.description,
            status=task.status.value,
            priority=task.priority.value,
            assignee_id=task.assignee_id,
            assignee_name=task.assignee_name,
            due_date=task.due_date,
            created_at=task.created_at,
        )

    def _update_model(self, model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.status = task.status.value
        model.priority = task.priority.value
        model.assignee_id = task.assignee_id
        model.assignee_name = task.assignee_name
        model.due_date = task.due_date
