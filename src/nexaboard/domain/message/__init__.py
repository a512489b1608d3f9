"""Message domain - the team feed."""

from nexaboard.domain.message.aggregates import Message
from nexaboard.domain.message.repositories import MessageRepository
from nexaboard.domain.message.value_objects import MessageType

__all__ = ["Message", "MessageRepository", "MessageType"]
