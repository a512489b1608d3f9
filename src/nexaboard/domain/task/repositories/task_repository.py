"""Repository interface for Task aggregate."""

from abc import ABC, abstractmethod
from uuid import UUID

from nexaboard.domain.task.aggregates import Task


class TaskRepository(ABC):
    """Repository interface for Task persistence."""

    @abstractmethod
    async def find_by_id(self, task_id: UUID) -> Task | None:
        """Find task by ID, None if not found."""

    @abstractmethod
    async def find_by_project(self, project_id: UUID) -> list[Task]:
        """Return the tasks of a project, oldest first."""

    @abstractmethod
    async def find_by_assignee(self, assignee_id: UUID) -> list[Task]:
        """Return the tasks assigned to a user, oldest first."""

    @abstractmethod
    async def save(self, task: Task) -> None:
        """Save task (create or update)."""

    @abstractmethod
    async def delete(self, task_id: UUID) -> bool:
        """Delete task. Returns True if a row was removed."""
