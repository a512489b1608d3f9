from nexaboard.domain.message.repositories.message_repository import (
    MessageRepository,
)

__all__ = ["MessageRepository"]
