"""Project schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nexaboard.domain.project import Project


class ProjectCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    manager_id: UUID
    deadline: date | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Website relaunch",
                "manager_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                "deadline": "2026-12-31",
            },
        },
    )


class ProjectResponse(BaseModel):
    id: UUID
    name: str
    description: str | None
    total_progress: int
    status: str
    manager_id: UUID
    manager_name: str | None
    deadline: date | None
    team_ids: list[UUID]
    team_size: int
    created_at: datetime


def to_project_response(project: Project) -> ProjectResponse:
    return ProjectResponse(
        id=project.id,
        name=project.name,
        description=project.description,
        total_progress=project.total_progress,
        status=project.status,
        manager_id=project.manager_id,
        manager_name=project.manager_name,
        deadline=project.deadline,
        team_ids=list(project.team_ids),
        team_size=len(project.team_ids),
        created_at=project.created_at,
    )
