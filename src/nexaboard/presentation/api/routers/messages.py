"""Team feed router."""

from uuid import UUID

from fastapi import APIRouter, status

from nexaboard.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    MessageServiceDep,
)
from nexaboard.presentation.api.schemas.messages import (
    MessageCreateRequest,
    MessageResponse,
    to_message_response,
)

router = APIRouter()


@router.get("", summary="List all messages, newest first")
async def list_messages(
    _: CurrentUser,
    service: MessageServiceDep,
) -> list[MessageResponse]:
    messages = await service.list_all()
    return [to_message_response(m) for m in messages]


@router.get("/project/{project_id}", summary="List a project's messages")
async def project_messages(
    project_id: UUID,
    _: CurrentUser,
    service: MessageServiceDep,
) -> list[MessageResponse]:
    messages = await service.list_by_project(project_id)
    return [to_message_response(m) for m in messages]


@router.post("", status_code=status.HTTP_201_CREATED, summary="Post a message")
async def post_message(
    request: MessageCreateRequest,
    current_user: CurrentUser,
    service: MessageServiceDep,
    session: DBSession,
) -> MessageResponse:
    message = await service.post(
        sender=current_user,
        content=request.content,
        message_type=request.type,
        project_id=request.project_id,
        project_name=request.project_name,
    )
    await session.commit()
    return to_message_response(message)
