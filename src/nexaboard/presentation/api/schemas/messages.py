"""Team feed schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from nexaboard.domain.message import Message, MessageType


class MessageCreateRequest(BaseModel):
    """Request schema for posting to the feed.

    There are no sender fields: the sender is always the caller.
    """

    content: str = Field(..., min_length=1)
    type: MessageType | None = None
    project_id: UUID | None = None
    project_name: str | None = Field(default=None, max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "content": "We ship on Friday.",
                "type": "decision",
            },
        },
    )


class MessageResponse(BaseModel):
    id: UUID
    sender_id: UUID
    sender_name: str
    sender_role: str
    content: str
    type: MessageType
    project_id: UUID | None
    project_name: str | None
    created_at: datetime


def to_message_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        sender_id=message.sender_id,
        sender_name=message.sender_name,
        sender_role=message.sender_role,
        content=message.content,
        type=message.type,
        project_id=message.project_id,
        project_name=message.project_name,
        created_at=message.created_at,
    )
