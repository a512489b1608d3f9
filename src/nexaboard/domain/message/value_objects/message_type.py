from enum import Enum


class MessageType(str, Enum):
    MESSAGE = "message"
    DECISION = "decision"
    ANNOUNCEMENT = "announcement"
