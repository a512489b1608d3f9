"""Task domain - work items on a project board."""

from nexaboard.domain.task.aggregates import UNASSIGNED, Task
from nexaboard.domain.task.exceptions import InvalidTaskStatusError, TaskNotFoundError
from nexaboard.domain.task.repositories import TaskRepository
from nexaboard.domain.task.value_objects import TaskPriority, TaskStatus

__all__ = [
    "UNASSIGNED",
    "InvalidTaskStatusError",
    "Task",
    "TaskNotFoundError",
    "TaskPriority",
    "TaskRepository",
    "TaskStatus",
]
