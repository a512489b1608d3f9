"""Task board use cases."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Union
from uuid import UUID

from nexaboard.domain.task import (
    UNASSIGNED,
    InvalidTaskStatusError,
    Task,
    TaskNotFoundError,
    TaskPriority,
    TaskStatus,
)

if TYPE_CHECKING:
    from nexaboard.domain.task import TaskRepository
    from nexaboard_identity.domain.user import UserRepository


class TaskService:
    """Create, update, move and delete tasks.

    The assignee's display name is resolved from the user store whenever the
    assignee is set, and falls back to "Unassigned" for unknown ids.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        user_repository: UserRepository,
    ):
        self._task_repo = task_repository
        self._user_repo = user_repository

    async def create(  # NOQA: PLR0913
        self,
        title: str,
        project_id: UUID,
        description: str | None = None,
        status: TaskStatus | None = None,
        priority: TaskPriority | None = None,
        assignee_id: UUID | None = None,
        due_date: date | None = None,
    ) -> Task:
        task = Task(
            title=title,
            project_id=project_id,
            description=description,
            status=status or TaskStatus.TODO,
            priority=priority or TaskPriority.MEDIUM,
            due_date=due_date,
        )
        task.assign(assignee_id, await self._resolve_assignee_name(assignee_id))

        await self._task_repo.save(task)
        return task

    async def update(  # NOQA: PLR0913
        self,
        task_id: UUID,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | None = None,
        priority: TaskPriority | None = None,
        assignee_id: UUID | None = None,
        due_date: date | None = None,
    ) -> Task:
        """Apply the given fields; ``None`` leaves a field unchanged.

        A blank title is ignored as well.
        """
        task = await self._get(task_id)

        if title is not None and title.strip():
            task.title = title
        if description is not None:
            task.description = description
        if status is not None:
            task.move_to(status)
        if priority is not None:
            task.priority = priority
        if due_date is not None:
            task.due_date = due_date
        if assignee_id is not None:
            task.assign(assignee_id, await self._resolve_assignee_name(assignee_id))

        await self._task_repo.save(task)
        return task

    async def change_status(
        self,
        task_id: UUID,
        status: Union[str, TaskStatus],
    ) -> Task:
        """Move a task to another board column.

        Raises
        ------
        InvalidTaskStatusError
            If ``status`` is not a known column name
        TaskNotFoundError
            If the task does not exist
        """
        new_status = self._parse_status(status)
        task = await self._get(task_id)
        task.move_to(new_status)
        await self._task_repo.save(task)
        return task

    async def list_by_project(self, project_id: UUID) -> list[Task]:
        return await self._task_repo.find_by_project(project_id)

    async def list_by_assignee(self, user_id: UUID) -> list[Task]:
        return await self._task_repo.find_by_assignee(user_id)

    async def delete(self, task_id: UUID) -> None:
        await self._task_repo.delete(task_id)

    async def _get(self, task_id: UUID) -> Task:
        task = await self._task_repo.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(str(task_id))
        return task

    async def _resolve_assignee_name(self, assignee_id: UUID | None) -> str:
        if assignee_id is None:
            return UNASSIGNED
        assignee = await self._user_repo.find_by_id(assignee_id)
        return assignee.name if assignee is not None else UNASSIGNED

    @staticmethod
    def _parse_status(status: Union[str, TaskStatus]) -> TaskStatus:
        if isinstance(status, TaskStatus):
            return status
        try:
            return TaskStatus(status.strip().upper())
        except ValueError as e:
            raise InvalidTaskStatusError(status) from e
