"""Message aggregate."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from nexaboard.domain.message.value_objects import MessageType
from nexaboard.domain.shared.time import utc_now


@dataclass
class Message:
    """A post on the team feed, optionally scoped to one project.

    Sender fields are copied from the author at posting time and are not
    kept in sync with later changes to the user.
    """

    sender_id: UUID
    sender_name: str
    sender_role: str
    content: str
    type: MessageType = MessageType.MESSAGE
    project_id: UUID | None = None
    project_name: str | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
