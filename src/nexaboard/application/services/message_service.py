"""Team feed use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from nexaboard.domain.message import Message, MessageType

if TYPE_CHECKING:
    from nexaboard.domain.message import MessageRepository
    from nexaboard_identity.domain.user import User


class MessageService:
    """Post to and read the team feed."""

    def __init__(self, message_repository: MessageRepository):
        self._message_repo = message_repository

    async def post(
        self,
        sender: User,
        content: str,
        message_type: MessageType | None = None,
        project_id: UUID | None = None,
        project_name: str | None = None,
    ) -> Message:
        """Post a message authored by ``sender``.

        Sender id, name and role always come from the authenticated user,
        never from client input.
        """
        message = Message(
            sender_id=sender.id,
            sender_name=sender.name,
            sender_role=sender.role.value,
            content=content,
            type=message_type or MessageType.MESSAGE,
            project_id=project_id,
            project_name=project_name,
        )
        await self._message_repo.save(message)
        return message

    async def list_all(self) -> list[Message]:
        return await self._message_repo.find_all()

    async def list_by_project(self, project_id: UUID) -> list[Message]:
        return await self._message_repo.find_by_project(project_id)
