"""Task schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nexaboard.domain.task import Task, TaskPriority, TaskStatus


class TaskCreateRequest(BaseModel):
    """Request schema for creating a task.

    Status defaults to TODO and priority to MEDIUM.
    """

    title: str = Field(..., min_length=1, max_length=255)
    project_id: UUID
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assignee_id: UUID | None = None
    due_date: date | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Draft landing page copy",
                "project_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "priority": "HIGH",
            },
        },
    )


class TaskUpdateRequest(BaseModel):
    """Partial update; omitted or null fields are left unchanged."""

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    assignee_id: UUID | None = None
    due_date: date | None = None


class TaskResponse(BaseModel):
    id: UUID
    project_id: UUID
    title: str
    description: str | None
    status: TaskStatus
    priority: TaskPriority
    assignee_id: UUID | None
    assignee_name: str
    due_date: date | None
    created_at: datetime


def to_task_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        project_id=task.project_id,
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        assignee_id=task.assignee_id,
        assignee_name=task.assignee_name,
        due_date=task.due_date,
        created_at=task.created_at,
    )
