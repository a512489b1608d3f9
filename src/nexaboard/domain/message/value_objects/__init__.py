from nexaboard.domain.message.value_objects.message_type import MessageType

__all__ = ["MessageType"]
