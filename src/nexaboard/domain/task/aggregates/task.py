"""Task aggregate."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from nexaboard.domain.shared.time import utc_now
from nexaboard.domain.task.value_objects import TaskPriority, TaskStatus

UNASSIGNED = "Unassigned"


@dataclass
class Task:
    """A unit of work inside a project.

    ``assignee_name`` is denormalized from the assignee's user record and is
    ``"Unassigned"`` whenever there is no assignee or the id is unknown.
    """

    title: str
    project_id: UUID
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    assignee_id: UUID | None = None
    assignee_name: str = UNASSIGNED
    due_date: date | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)

    def assign(self, assignee_id: UUID | None, assignee_name: str | None) -> None:
        self.assignee_id = assignee_id
        self.assignee_name = assignee_name or UNASSIGNED

    def move_to(self, status: TaskStatus) -> None:
        self.status = status
