"""Projects router."""

from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from nexaboard.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    ManagerUser,
    ProjectServiceDep,
)
from nexaboard.presentation.api.schemas.projects import (
    ProjectCreateRequest,
    ProjectResponse,
    to_project_response,
)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    responses={
        403: {"description": "Caller is not a manager or admin"},
        404: {"description": "Manager not found"},
    },
)
async def create_project(
    request: ProjectCreateRequest,
    _: ManagerUser,
    service: ProjectServiceDep,
    session: DBSession,
) -> ProjectResponse:
    project = await service.create(
        name=request.name,
        manager_id=request.manager_id,
        deadline=request.deadline,
    )
    await session.commit()
    return to_project_response(project)


@router.get("", summary="List all projects")
async def list_projects(
    _: CurrentUser,
    service: ProjectServiceDep,
) -> list[ProjectResponse]:
    projects = await service.list_all()
    return [to_project_response(p) for p in projects]


@router.get("/my-projects", summary="List projects a user manages or works on")
async def my_projects(
    current_user: CurrentUser,
    service: ProjectServiceDep,
    user_id: UUID | None = Query(
        default=None,
        description="Defaults to the signed-in user",
    ),
) -> list[ProjectResponse]:
    projects = await service.list_for_user(user_id or current_user.id)
    return [to_project_response(p) for p in projects]


@router.get(
    "/{project_id}",
    summary="Get a project",
    responses={404: {"description": "Project not found"}},
)
async def get_project(
    project_id: UUID,
    _: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectResponse:
    return to_project_response(await service.get(project_id))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
)
async def delete_project(
    project_id: UUID,
    _: ManagerUser,
    service: ProjectServiceDep,
    session: DBSession,
) -> Response:
    await service.delete(project_id)
    await session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
