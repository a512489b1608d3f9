"""SQLAlchemy models for persistence layer."""

from nexaboard.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from nexaboard.infrastructure.persistence.sqlalchemy.models.message_model import (
    MessageModel,
)
from nexaboard.infrastructure.persistence.sqlalchemy.models.project_model import (
    ProjectMemberModel,
    ProjectModel,
)
from nexaboard.infrastructure.persistence.sqlalchemy.models.task_model import (
    TaskModel,
)

__all__ = [
    "Base",
    "MessageModel",
    "ProjectMemberModel",
    "ProjectModel",
    "TaskModel",
    "TimestampMixin",
]
