"""SQLAlchemy implementation of MessageRepository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from nexaboard.domain.message import Message, MessageRepository, MessageType
from nexaboard.infrastructure.persistence.sqlalchemy.models import MessageModel


class MessageRepositorySQLAlchemy(MessageRepository):
    """SQLAlchemy implementation of MessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> list[Message]:
        stmt = select(MessageModel).order_by(MessageModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_project(self, project_id: UUID) -> list[Message]:
        stmt = (
            select(MessageModel)
            .where(MessageModel.project_id == project_id)
            .order_by(MessageModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def save(self, message: Message) -> None:
        # Messages are never edited after posting
        self._session.add(self._map_to_model(message))
        await self._session.flush()

    async def count(self) -> int:
        stmt = select(func.count()).select_from(MessageModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _map_to_domain(self, model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            sender_name=model.sender_name,
            sender_role=model.sender_role,
            content=model.content,
            type=MessageType(model.type),
            project_id=model.project_id,
            project_name=model.project_name,
            created_at=model.created_at,
        )

    def _map_to_model(self, message: Message) -> MessageModel:
        return MessageModel(
            id=message.id,
            sender_id=message.sender_id,
            sender_name=message.sender_name,
            sender_role=message.sender_role,
            content=message.content,
            type=message.type.value,
            project_id=message.project_id,
            project_name=message.project_name,
            created_at=message.created_at,
        )
