"""Tasks router."""

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from nexaboard.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    TaskServiceDep,
)
from nexaboard.presentation.api.schemas.tasks import (
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
    to_task_response,
)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a task")
async def create_task(
    request: TaskCreateRequest,
    _: CurrentUser,
    service: TaskServiceDep,
    session: DBSession,
) -> TaskResponse:
    task = await service.create(
        title=request.title,
        project_id=request.project_id,
        description=request.description,
        status=request.status,
        priority=request.priority,
        assignee_id=request.assignee_id,
        due_date=request.due_date,
    )
    await session.commit()
    return to_task_response(task)


@router.put(
    "/{task_id}",
    summary="Update a task",
    responses={404: {"description": "Task not found"}},
)
async def update_task(
    task_id: UUID,
    request: TaskUpdateRequest,
    _: CurrentUser,
    service: TaskServiceDep,
    session: DBSession,
) -> TaskResponse:
    task = await service.update(
        task_id,
        title=request.title,
        description=request.description,
        status=request.status,
        priority=request.priority,
        assignee_id=request.assignee_id,
        due_date=request.due_date,
    )
    await session.commit()
    return to_task_response(task)


@router.patch(
    "/{task_id}/status",
    summary="Move a task to another column",
    responses={
        400: {"description": "Unknown status"},
        404: {"description": "Task not found"},
    },
)
async def update_task_status(
    task_id: UUID,
    _: CurrentUser,
    service: TaskServiceDep,
    session: DBSession,
    new_status: str = Query(..., alias="status"),
) -> TaskResponse:
    task = await service.change_status(task_id, new_status)
    await session.commit()
    return to_task_response(task)


@router.get("/project/{project_id}", summary="List the tasks of a project")
async def tasks_by_project(
    project_id: UUID,
    _: CurrentUser,
    service: TaskServiceDep,
) -> list[TaskResponse]:
    tasks = await service.list_by_project(project_id)
    return [to_task_response(t) for t in tasks]


@router.get("/my-tasks", summary="List tasks assigned to a user")
async def my_tasks(
    current_user: CurrentUser,
    service: TaskServiceDep,
    user_id: UUID | None = Query(
        default=None,
        description="Defaults to the signed-in user",
    ),
) -> list[TaskResponse]:
    tasks = await service.list_by_assignee(user_id or current_user.id)
    return [to_task_response(t) for t in tasks]


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
async def delete_task(
    task_id: UUID,
    _: CurrentUser,
    service: TaskServiceDep,
    session: DBSession,
) -> Response:
    await service.delete(task_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
