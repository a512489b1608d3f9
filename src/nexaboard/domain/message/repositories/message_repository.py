"""Repository interface for Message aggregate."""

from abc import ABC, abstractmethod
from uuid import UUID

from nexaboard.domain.message.aggregates import Message


class MessageRepository(ABC):
    """Repository interface for Message persistence.

    Listing methods return messages newest first.
    """

    @abstractmethod
    async def find_all(self) -> list[Message]:
        pass

    @abstractmethod
    async def find_by_project(self, project_id: UUID) -> list[Message]:
        pass

    @abstractmethod
    async def save(self, message: Message) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
