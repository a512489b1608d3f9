from nexaboard.domain.message.aggregates.message import Message

__all__ = ["Message"]
